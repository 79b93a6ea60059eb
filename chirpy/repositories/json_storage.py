"""
JSON-based persistence adapter.

The whole store lives in one file: a JSON object with a "chirps" and a
"users" member, each mapping the record id (as a string) to the record.
Every write replaces the file in its entirety.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from chirpy.domain.models import Chirp, Snapshot, User
from chirpy.repositories.errors import DecodeError, EncodeError, StorageIOError

logger = logging.getLogger(__name__)


def _chirp_to_dict(chirp: Chirp) -> dict:
    return {"id": chirp.id, "body": chirp.body, "authorId": chirp.author_id}


def _user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "password": user.password,
        "isChirpyRed": user.is_chirpy_red,
    }


def _require_int(record: dict, key: str, default: int | None = None) -> int:
    value = record.get(key, default)
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise DecodeError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _record_id(name: str, key: str, record: dict) -> int:
    record_id = _require_int(record, "id")
    if record_id < 1:
        raise DecodeError(f"{name}[{key}] has non-positive id {record_id}")
    if key != str(record_id):
        raise DecodeError(f"{name}[{key}] holds record with id {record_id}")
    return record_id


def _require_str(record: dict, key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise DecodeError(f"field {key!r} must be a string, got {value!r}")
    return value


def _collection(data: dict, name: str) -> dict[str, Any]:
    items = data.get(name)
    if items is None:
        return {}
    if not isinstance(items, dict):
        raise DecodeError(f"{name!r} must be an object")
    for key, record in items.items():
        if not isinstance(record, dict):
            raise DecodeError(f"{name}[{key}] must be an object")
    return items


def encode(snapshot: Snapshot) -> bytes:
    """Serialize a full snapshot to UTF-8 JSON bytes."""
    db = {
        "chirps": {str(cid): _chirp_to_dict(chirp) for cid, chirp in snapshot.chirps.items()},
        "users": {str(uid): _user_to_dict(user) for uid, user in snapshot.users.items()},
    }
    try:
        return json.dumps(db, ensure_ascii=False, indent=2).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"could not encode snapshot: {exc}") from exc


def decode(data: bytes) -> Snapshot:
    """Parse bytes produced by encode() (or an older file) into a Snapshot."""
    try:
        db = json.loads(data.decode("utf-8")) if data.strip() else None
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(db, dict):
        raise DecodeError("snapshot must be a JSON object")

    snapshot = Snapshot()
    for key, record in _collection(db, "chirps").items():
        chirp = Chirp(
            id=_record_id("chirps", key, record),
            body=_require_str(record, "body"),
            author_id=_require_int(record, "authorId", 0),
        )
        snapshot.chirps[chirp.id] = chirp
    for key, record in _collection(db, "users").items():
        red = record.get("isChirpyRed", False)
        if not isinstance(red, bool):
            raise DecodeError(f"field 'isChirpyRed' must be a boolean, got {red!r}")
        user = User(
            id=_record_id("users", key, record),
            email=_require_str(record, "email"),
            password=_require_str(record, "password"),
            is_chirpy_red=red,
        )
        snapshot.users[user.id] = user
    return snapshot


class JSONStorage:
    """Owns the backing file; loads and rewrites complete snapshots."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def initialize(self) -> bool:
        """Create the file with an empty snapshot if absent. Returns True if created."""
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.exception("Failed to create directory for %s", self.path)
            raise StorageIOError(f"could not create {self.path.parent}: {exc}") from exc
        self.store(Snapshot())
        logger.info("Created empty database at %s", self.path)
        return True

    def load(self) -> Snapshot:
        if self.initialize():
            return Snapshot()
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            logger.exception("Failed to read %s", self.path)
            raise StorageIOError(f"could not read {self.path}: {exc}") from exc
        return decode(data)

    def store(self, snapshot: Snapshot) -> None:
        data = encode(snapshot)
        try:
            self.path.write_bytes(data)
        except OSError as exc:
            logger.exception("Failed to write %s", self.path)
            raise StorageIOError(f"could not write {self.path}: {exc}") from exc
        logger.debug("Persisted %d chirps, %d users to %s", len(snapshot.chirps), len(snapshot.users), self.path)
