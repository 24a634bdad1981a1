"""Shared fixtures: a small record type and stores backed by tmp_path."""

import pytest

from recordstore.config import Settings
from recordstore.repositories.file_store import FileStore
from recordstore.schemas.records import Record


class Item(Record):
    key: str
    val: int
    tags: list[str] = []


@pytest.fixture
def settings(monkeypatch, tmp_path):
    monkeypatch.setenv("RECORDSTORE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("RECORDSTORE_STRICT_WRITES", raising=False)
    monkeypatch.delenv("RECORDSTORE_JSON_INDENT", raising=False)
    return Settings()


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "items.json"


@pytest.fixture
def store(store_path, settings):
    return FileStore(store_path, Item, settings=settings)
