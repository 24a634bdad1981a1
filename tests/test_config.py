"""Unit tests for Settings."""

from pathlib import Path

from recordstore.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("RECORDSTORE_DATA_DIR", "RECORDSTORE_STRICT_WRITES", "RECORDSTORE_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.RECORDSTORE_DATA_DIR == Path("data")
    assert s.RECORDSTORE_STRICT_WRITES is True
    assert s.RECORDSTORE_JSON_INDENT == 2
    assert s.json_indent == 2


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RECORDSTORE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RECORDSTORE_STRICT_WRITES", "no")
    monkeypatch.setenv("RECORDSTORE_JSON_INDENT", "0")
    s = Settings()
    assert s.RECORDSTORE_DATA_DIR == tmp_path
    assert s.RECORDSTORE_STRICT_WRITES is False
    assert s.json_indent is None


def test_bad_indent_falls_back(monkeypatch):
    monkeypatch.setenv("RECORDSTORE_JSON_INDENT", "wide")
    assert Settings().RECORDSTORE_JSON_INDENT == 2


def test_resolve_path(monkeypatch, tmp_path):
    monkeypatch.setenv("RECORDSTORE_DATA_DIR", str(tmp_path))
    s = Settings()
    assert s.resolve_path("items.json") == tmp_path / "items.json"
    absolute = tmp_path / "elsewhere" / "x.json"
    assert s.resolve_path(absolute) == absolute
