"""Persistence layer: abstract interface and implementations."""

from .base import (
    DuplicateKeyError,
    KeyNotFoundError,
    PersistenceError,
    RecordStoreError,
    StoreProtocol,
)
from .file_store import FileStore

__all__ = [
    "DuplicateKeyError",
    "FileStore",
    "KeyNotFoundError",
    "PersistenceError",
    "RecordStoreError",
    "StoreProtocol",
]
