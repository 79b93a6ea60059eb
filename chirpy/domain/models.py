"""Records held by the JSON store."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Chirp:
    id: int
    body: str
    author_id: int


@dataclass
class User:
    id: int
    email: str
    password: str
    is_chirpy_red: bool = False


@dataclass
class Snapshot:
    """Complete state of the store: chirps and users keyed by id."""

    chirps: dict[int, Chirp] = field(default_factory=dict)
    users: dict[int, User] = field(default_factory=dict)
