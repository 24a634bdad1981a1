"""recordstore: key-addressed records persisted as whole-file JSON snapshots."""

from .config import Settings, get_settings
from .repositories import (
    DuplicateKeyError,
    FileStore,
    KeyNotFoundError,
    PersistenceError,
    RecordStoreError,
    StoreProtocol,
)
from .schemas import PersistableRecord, Record

__version__ = "0.1.0"
__all__ = [
    "DuplicateKeyError",
    "FileStore",
    "KeyNotFoundError",
    "PersistableRecord",
    "PersistenceError",
    "Record",
    "RecordStoreError",
    "Settings",
    "StoreProtocol",
    "get_settings",
]
