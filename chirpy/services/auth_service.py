"""
Authentication and identity related use cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from chirpy.core.config import Settings
from chirpy.core.security import create_access_token, decode_access_token, hash_password, verify_password
from chirpy.domain.models import User
from chirpy.repositories.errors import NotFoundError
from chirpy.repositories.record_store import RecordStore


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    pass


class TokenInvalidError(AuthError):
    pass


@dataclass
class LoginResult:
    user: User
    token: str


@dataclass
class AuthService:
    """Handles registration, login, credential updates and token checks."""

    store: RecordStore
    settings: Settings

    def register(self, email: str, password: str) -> User:
        return self.store.create_user(email, hash_password(password))

    def login(self, email: str, password: str, expires_in_seconds: Optional[int] = None) -> LoginResult:
        try:
            user = self.store.get_user_by_email(email)
        except NotFoundError:
            raise InvalidCredentialsError("unknown email or wrong password") from None
        if not verify_password(password, user.password):
            raise InvalidCredentialsError("unknown email or wrong password")
        ttl = expires_in_seconds or self.settings.jwt_default_ttl_seconds
        token = create_access_token(user.id, self.settings.jwt_secret, ttl)
        return LoginResult(user=user, token=token)

    def update_credentials(self, user_id: int, email: str, password: str) -> User:
        return self.store.update_user(user_id, email, hash_password(password))

    def authenticate(self, token: str) -> int:
        """Validate a JWT and return the user id in its subject."""
        subject = decode_access_token(token, self.settings.jwt_secret)
        if subject is None:
            raise TokenInvalidError("invalid or expired token")
        try:
            return int(subject)
        except ValueError:
            raise TokenInvalidError("token subject is not a user id") from None
