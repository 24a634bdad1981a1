"""Pydantic record contract."""

from .records import PersistableRecord, Record

__all__ = [
    "PersistableRecord",
    "Record",
]
