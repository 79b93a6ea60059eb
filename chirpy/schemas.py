"""Request/response payloads for the HTTP API."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from chirpy.domain.models import Chirp, User


class Credentials(BaseModel):
    email: str
    password: str


class LoginRequest(Credentials):
    expires_in_seconds: Optional[int] = None


class UserOut(BaseModel):
    id: int
    email: str
    is_chirpy_red: bool

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(id=user.id, email=user.email, is_chirpy_red=user.is_chirpy_red)


class LoginOut(UserOut):
    token: str


class ChirpCreate(BaseModel):
    body: str


class ChirpOut(BaseModel):
    id: int
    body: str
    author_id: int

    @classmethod
    def from_chirp(cls, chirp: Chirp) -> "ChirpOut":
        return cls(id=chirp.id, body=chirp.body, author_id=chirp.author_id)


class WebhookData(BaseModel):
    user_id: int = 0


class WebhookEvent(BaseModel):
    event: str
    data: WebhookData = Field(default_factory=WebhookData)
