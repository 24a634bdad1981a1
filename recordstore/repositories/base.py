"""Store interface and error taxonomy shared by store implementations."""

from typing import Any, Protocol, TypeVar

K = TypeVar("K")
R = TypeVar("R")


class RecordStoreError(Exception):
    """Base for store failures with a machine-readable code."""
    def __init__(self, message: str, code: str = "record_store_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class DuplicateKeyError(RecordStoreError, ValueError):
    """create() was given a key that is already stored."""
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key already in use: {key!r}", code="duplicate_key")


class KeyNotFoundError(RecordStoreError, LookupError):
    """read(), update() or delete() was given a key that is not stored."""
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key not found: {key!r}", code="key_not_found")


class PersistenceError(RecordStoreError):
    """The snapshot could not be written to the backing file."""
    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message, code="persistence_error")


class StoreProtocol(Protocol[K, R]):
    """Key-addressed CRUD over a homogeneous collection of records."""

    def create(self, data: R) -> None:
        ...

    def read(self, key: K) -> R:
        ...

    def update(self, data: R) -> None:
        ...

    def delete(self, key: K) -> None:
        ...

    def get_all(self) -> list[R]:
        ...
