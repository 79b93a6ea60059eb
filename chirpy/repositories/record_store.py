"""High-level data access helpers backed by the JSON file."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Mapping

from chirpy.domain.models import Chirp, User
from chirpy.repositories.errors import AccessDeniedError, AlreadyExistsError, NotFoundError
from chirpy.repositories.json_storage import JSONStorage

logger = logging.getLogger(__name__)


def next_id(records: Mapping[int, object]) -> int:
    """One more than the highest id present; 1 for an empty collection.

    No counter is persisted, so deleting the highest record frees its id for
    the next create.
    """
    return max(records, default=0) + 1


class RecordStore:
    """CRUD helpers over the chirps/users snapshot.

    Each operation holds a single lock for the whole load, mutate, persist
    cycle (or load-only for reads), and reloads the file every time so edits
    made outside the process are seen.
    """

    def __init__(self, path: str | Path | JSONStorage) -> None:
        self.storage = path if isinstance(path, JSONStorage) else JSONStorage(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self.storage.path

    def initialize(self) -> None:
        """Create the backing file if missing. Safe to call more than once."""
        with self._lock:
            self.storage.initialize()

    # -------------------------- users --------------------------
    def create_user(self, email: str, hashed_password: str) -> User:
        with self._lock:
            snapshot = self.storage.load()
            if any(user.email == email for user in snapshot.users.values()):
                raise AlreadyExistsError(f"user with email {email!r} already exists")
            user = User(id=next_id(snapshot.users), email=email, password=hashed_password)
            snapshot.users[user.id] = user
            self.storage.store(snapshot)
            logger.info("Created user %d", user.id)
            return user

    def get_user_by_email(self, email: str) -> User:
        with self._lock:
            snapshot = self.storage.load()
        for user in snapshot.users.values():
            if user.email == email:
                return user
        raise NotFoundError(f"no user with email {email!r}")

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock:
            snapshot = self.storage.load()
        user = snapshot.users.get(user_id)
        if user is None:
            raise NotFoundError(f"user {user_id} not found")
        return user

    def update_user(self, user_id: int, email: str, hashed_password: str) -> User:
        # Email uniqueness is only enforced on create.
        with self._lock:
            snapshot = self.storage.load()
            user = snapshot.users.get(user_id)
            if user is None:
                raise NotFoundError(f"user {user_id} not found")
            user.email = email
            user.password = hashed_password
            self.storage.store(snapshot)
            return user

    def update_subscription(self, user_id: int, is_chirpy_red: bool) -> None:
        with self._lock:
            snapshot = self.storage.load()
            user = snapshot.users.get(user_id)
            if user is None:
                raise NotFoundError(f"user {user_id} not found")
            user.is_chirpy_red = is_chirpy_red
            self.storage.store(snapshot)
            logger.info("User %d subscription set to %s", user_id, is_chirpy_red)

    # -------------------------- chirps --------------------------
    def create_chirp(self, body: str, author_id: int) -> Chirp:
        with self._lock:
            snapshot = self.storage.load()
            chirp = Chirp(id=next_id(snapshot.chirps), body=body, author_id=author_id)
            snapshot.chirps[chirp.id] = chirp
            self.storage.store(snapshot)
            return chirp

    def get_chirp(self, chirp_id: int) -> Chirp:
        with self._lock:
            snapshot = self.storage.load()
        chirp = snapshot.chirps.get(chirp_id)
        if chirp is None:
            raise NotFoundError(f"chirp {chirp_id} not found")
        return chirp

    def get_chirps(self) -> list[Chirp]:
        with self._lock:
            snapshot = self.storage.load()
        return [snapshot.chirps[cid] for cid in sorted(snapshot.chirps)]

    def delete_chirp(self, chirp_id: int, requesting_user_id: int) -> None:
        with self._lock:
            snapshot = self.storage.load()
            chirp = snapshot.chirps.get(chirp_id)
            if chirp is None:
                raise NotFoundError(f"chirp {chirp_id} not found")
            if chirp.author_id != requesting_user_id:
                raise AccessDeniedError(f"user {requesting_user_id} is not the author of chirp {chirp_id}")
            del snapshot.chirps[chirp_id]
            self.storage.store(snapshot)
