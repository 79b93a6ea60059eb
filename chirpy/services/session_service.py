"""Request credential helpers (bearer tokens, API keys)."""
from __future__ import annotations

from fastapi import HTTPException, Request

from chirpy.services.auth_service import AuthService, TokenInvalidError

AUTHORIZATION_HEADER = "Authorization"


class MissingAuthorizationError(Exception):
    """Raised when the Authorization header is absent or malformed."""


def _authorization_value(request: Request, scheme: str) -> str:
    header = request.headers.get(AUTHORIZATION_HEADER)
    if not header:
        raise MissingAuthorizationError("no authorization header included")
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != scheme.lower():
        raise MissingAuthorizationError(f"malformed {scheme} authorization header")
    return parts[1]


def bearer_token(request: Request) -> str:
    """Return the token from `Authorization: Bearer <token>`."""
    return _authorization_value(request, "Bearer")


def api_key(request: Request) -> str:
    """Return the key from `Authorization: ApiKey <key>`."""
    return _authorization_value(request, "ApiKey")


def current_user_id(request: Request) -> int:
    """Resolve the authenticated user id from the bearer JWT, or raise 401."""
    svc: AuthService | None = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService not configured")
    try:
        return svc.authenticate(bearer_token(request))
    except (MissingAuthorizationError, TokenInvalidError) as exc:
        raise HTTPException(401, str(exc)) from exc
