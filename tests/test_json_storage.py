"""
Codec and persistence tests for the single-file JSON storage.
"""
from __future__ import annotations

import json

import pytest

from chirpy.domain.models import Chirp, Snapshot, User
from chirpy.repositories.errors import DecodeError, StorageIOError
from chirpy.repositories.json_storage import JSONStorage, decode, encode


def test_encode_decode_preserves_records():
    snapshot = Snapshot(
        chirps={2: Chirp(id=2, body="second", author_id=1), 1: Chirp(id=1, body="first", author_id=3)},
        users={1: User(id=1, email="a@example.com", password="hash", is_chirpy_red=True)},
    )

    restored = decode(encode(snapshot))

    assert restored.chirps == snapshot.chirps
    assert restored.users == snapshot.users


def test_encoded_layout_uses_string_keys_and_record_fields():
    snapshot = Snapshot(
        chirps={7: Chirp(id=7, body="hi", author_id=2)},
        users={2: User(id=2, email="b@example.com", password="hash")},
    )

    db = json.loads(encode(snapshot))

    assert db == {
        "chirps": {"7": {"id": 7, "body": "hi", "authorId": 2}},
        "users": {"2": {"id": 2, "email": "b@example.com", "password": "hash", "isChirpyRed": False}},
    }


def test_decode_accepts_files_without_newer_fields():
    data = b'{"chirps": {"1": {"id": 1, "body": "old"}}, "users": {"1": {"id": 1, "email": "x", "password": "p"}}}'

    snapshot = decode(data)

    assert snapshot.chirps[1].author_id == 0
    assert snapshot.users[1].is_chirpy_red is False


def test_decode_missing_collections_are_empty():
    snapshot = decode(b"{}")
    assert snapshot.chirps == {}
    assert snapshot.users == {}


@pytest.mark.parametrize(
    "data",
    [
        b"not json",
        b"",
        b"[]",
        b'{"chirps": []}',
        b'{"chirps": {"1": "body"}}',
        b'{"chirps": {"1": {"id": "1", "body": "x", "authorId": 1}}}',
        b'{"users": {"1": {"id": 1, "email": "x"}}}',
        b'{"users": {"1": {"id": 1, "email": "x", "password": "p", "isChirpyRed": "yes"}}}',
        b'{"chirps": {"0": {"id": 0, "body": "x", "authorId": 1}}}',
        b'{"chirps": {"-5": {"id": -5, "body": "x", "authorId": 1}}}',
        b'{"users": {"1": {"id": 1, "email": "a", "password": "p"}, "2": {"id": 1, "email": "b", "password": "p"}}}',
        b'{"chirps": {"3": {"id": 4, "body": "x", "authorId": 1}}}',
    ],
)
def test_decode_rejects_invalid_snapshots(data):
    with pytest.raises(DecodeError):
        decode(data)


def test_load_creates_empty_file_when_missing(tmp_path):
    path = tmp_path / "nested" / "database.json"
    storage = JSONStorage(path)

    snapshot = storage.load()

    assert snapshot.chirps == {} and snapshot.users == {}
    assert json.loads(path.read_text(encoding="utf-8")) == {"chirps": {}, "users": {}}


def test_store_replaces_whole_file(tmp_path):
    storage = JSONStorage(tmp_path / "database.json")
    storage.store(Snapshot(chirps={i: Chirp(id=i, body="x" * 100, author_id=1) for i in range(1, 20)}))

    storage.store(Snapshot(chirps={1: Chirp(id=1, body="short", author_id=1)}))

    assert storage.load().chirps == {1: Chirp(id=1, body="short", author_id=1)}


def test_initialize_is_idempotent(tmp_path):
    storage = JSONStorage(tmp_path / "database.json")
    assert storage.initialize() is True
    storage.store(Snapshot(users={1: User(id=1, email="a", password="p")}))

    assert storage.initialize() is False
    assert 1 in storage.load().users


def test_load_from_directory_path_raises_storage_error(tmp_path):
    storage = JSONStorage(tmp_path)
    with pytest.raises(StorageIOError):
        storage.load()


def test_load_corrupt_file_raises_decode_error(tmp_path):
    path = tmp_path / "database.json"
    path.write_text('{"chirps": {', encoding="utf-8")
    with pytest.raises(DecodeError):
        JSONStorage(path).load()


def test_decode_reads_camel_case_record_fields():
    data = (
        b'{"chirps": {"1": {"id": 1, "body": "x", "authorId": 7}},'
        b' "users": {"1": {"id": 1, "email": "a@example.com", "password": "hash", "isChirpyRed": true}}}'
    )

    snapshot = decode(data)

    assert snapshot.chirps[1].author_id == 7
    assert snapshot.users[1].is_chirpy_red is True
    assert json.loads(encode(snapshot)) == json.loads(data)
