"""Typed errors raised by the record store and its persistence layer."""
from __future__ import annotations


class StoreError(Exception):
    """Base class for record store failures."""


class StorageIOError(StoreError):
    """The backing file could not be created, read or written."""


class EncodeError(StoreError):
    """The snapshot could not be serialized."""


class DecodeError(StoreError):
    """The backing file does not hold a valid snapshot."""


class NotFoundError(StoreError):
    pass


class AlreadyExistsError(StoreError):
    pass


class AccessDeniedError(StoreError):
    pass
