"""Security helpers (password hashing and JWT issuance/validation)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from argon2 import PasswordHasher, exceptions as argon_exc
from jose import JWTError, jwt

_ph = PasswordHasher()
JWT_ALGORITHM = "HS256"
JWT_ISSUER = "chirpy"


def hash_password(password: str) -> str:
    """Create an Argon2 hash for storage."""
    return _ph.hash(password)


def verify_password(password: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    try:
        return _ph.verify(stored_hash, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def create_access_token(user_id: int, secret: str, expires_in_seconds: int) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "iss": JWT_ISSUER,
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(seconds=expires_in_seconds),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str) -> str | None:
    """Returns the subject (user id) or None if invalid."""
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM], issuer=JWT_ISSUER)
    except JWTError:
        return None
    return payload.get("sub")
