"""
File-backed implementation of StoreProtocol.
Keeps the records in memory and rewrites one JSON snapshot file after every
successful mutation.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from recordstore.config import Settings, get_settings

from .base import DuplicateKeyError, KeyNotFoundError, PersistenceError

logger = logging.getLogger(__name__)

K = TypeVar("K")
R = TypeVar("R")


class FileStore(Generic[K, R]):
    """Ordered, key-unique record collection persisted as a full snapshot."""

    def __init__(
        self,
        path,
        record_type: type[R],
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self._path = self.settings.resolve_path(path)
        self._record_type = record_type
        self._adapter = TypeAdapter(list[record_type])
        self._lock = threading.Lock()
        self._records: list[R] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    # ── Internal helpers ───────────────────────────────────────────────

    def _load(self) -> list[R]:
        """Read the snapshot; any failure means an empty store."""
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No snapshot at %s, starting empty", self._path)
            return []
        except OSError as e:
            logger.warning("Cannot read snapshot %s, starting empty: %s", self._path, e)
            return []
        try:
            records = self._adapter.validate_python(json.loads(raw))
        except ValidationError as e:
            logger.warning(
                "Corrupt snapshot %s, starting empty (%d errors)",
                self._path,
                e.error_count(),
            )
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Corrupt snapshot %s, starting empty: %s", self._path, e)
            return []
        keys = []
        for item in records:
            key = item.get_key()
            if key in keys:
                logger.warning(
                    "Duplicate key %r in snapshot %s, starting empty", key, self._path
                )
                return []
            keys.append(key)
        logger.debug("Loaded %d records from %s", len(records), self._path)
        return records

    def _encode(self) -> str:
        """Serialize the sequence, refusing output that would not load back."""
        data = [item.model_dump(mode="json") for item in self._records]
        payload = json.dumps(data, ensure_ascii=False, indent=self.settings.json_indent)
        self._adapter.validate_python(json.loads(payload))
        return payload

    def _write(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
            tmp.replace(self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d records to %s", len(self._records), self._path)

    def _commit(self, rollback: Callable[[], None]) -> None:
        """Persist the current sequence; on failure undo or report per settings."""
        try:
            payload = self._encode()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            rollback()
            raise PersistenceError(
                f"Records cannot be stored in {self._path}: {e}", path=self._path
            ) from e
        try:
            self._write(payload)
        except OSError as e:
            if self.settings.RECORDSTORE_STRICT_WRITES:
                rollback()
                raise PersistenceError(
                    f"Could not write snapshot to {self._path}: {e}", path=self._path
                ) from e
            logger.error(
                "Could not write snapshot to %s; memory and disk now differ",
                self._path,
                exc_info=True,
            )

    def _check_type(self, data) -> None:
        if type(data) is not self._record_type:
            raise TypeError(
                f"{type(self).__name__} holds {self._record_type.__name__}, "
                f"got {type(data).__name__}"
            )

    def _index_of(self, key: K) -> Optional[int]:
        for i, item in enumerate(self._records):
            if item.get_key() == key:
                return i
        return None

    # ── CRUD ───────────────────────────────────────────────────────────

    def create(self, data: R) -> None:
        """Append a copy of data. Raises DuplicateKeyError if its key is taken."""
        self._check_type(data)
        key = data.get_key()
        with self._lock:
            if self._index_of(key) is not None:
                raise DuplicateKeyError(key)
            self._records.append(data.clone())
            self._commit(self._records.pop)

    def read(self, key: K) -> R:
        """Return a copy of the record for key. Raises KeyNotFoundError."""
        with self._lock:
            i = self._index_of(key)
            if i is None:
                raise KeyNotFoundError(key)
            return self._records[i].clone()

    def update(self, data: R) -> None:
        """Replace the record sharing data's key, keeping its position."""
        self._check_type(data)
        key = data.get_key()
        with self._lock:
            i = self._index_of(key)
            if i is None:
                raise KeyNotFoundError(key)
            previous = self._records[i]
            self._records[i] = data.clone()

            def rollback():
                self._records[i] = previous

            self._commit(rollback)

    def delete(self, key: K) -> None:
        with self._lock:
            i = self._index_of(key)
            if i is None:
                raise KeyNotFoundError(key)
            removed = self._records.pop(i)
            self._commit(lambda: self._records.insert(i, removed))

    def get_all(self) -> list[R]:
        """Copies of every record, in insertion order."""
        with self._lock:
            return [item.clone() for item in self._records]

    # ── Introspection ──────────────────────────────────────────────────

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, key) -> bool:
        with self._lock:
            return self._index_of(key) is not None

    def __str__(self) -> str:
        with self._lock:
            return "".join(f"{item}\n" for item in self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={str(self._path)!r}, "
            f"record_type={self._record_type.__name__}, records={len(self._records)})"
        )
