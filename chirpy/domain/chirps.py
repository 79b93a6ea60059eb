"""Domain helpers for chirp body validation."""
from __future__ import annotations

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS = {
    "kerfuffle",
    "sharbert",
    "fornax",
}
MASK = "****"


class ChirpValidationError(ValueError):
    """Base exception for rejected chirp bodies."""


class ChirpEmptyError(ChirpValidationError):
    pass


class ChirpTooLongError(ChirpValidationError):
    pass


def mask_profanity(body: str) -> str:
    """Replace each space-separated profane word with a mask, keeping spacing."""
    words = body.split(" ")
    return " ".join(MASK if word.lower() in PROFANE_WORDS else word for word in words)


def validate_chirp(body: str | None) -> str:
    """Return the cleaned body or raise ChirpValidationError."""
    if not body:
        raise ChirpEmptyError("Chirp is empty")
    if len(body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError("Chirp is too long")
    return mask_profanity(body)
