"""
recordstore configuration.
Single source of truth for environment-driven store settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


def get_settings():
    """Return store settings (call directly or pass to FileStore)."""
    return Settings()


class Settings:
    """Store settings loaded from environment."""

    # Base directory for relative store paths
    RECORDSTORE_DATA_DIR: Path

    # Raise PersistenceError when a snapshot cannot be written.
    # False keeps the legacy log-and-continue behaviour.
    RECORDSTORE_STRICT_WRITES: bool = True

    # Snapshot indentation; 0 writes compact JSON
    RECORDSTORE_JSON_INDENT: int = 2

    def __init__(self):
        data_dir = os.environ.get("RECORDSTORE_DATA_DIR", "data")
        self.RECORDSTORE_DATA_DIR = Path(data_dir)
        strict = (os.environ.get("RECORDSTORE_STRICT_WRITES") or "true").strip().lower()
        self.RECORDSTORE_STRICT_WRITES = strict in _TRUTHY
        indent = (os.environ.get("RECORDSTORE_JSON_INDENT") or "2").strip()
        try:
            self.RECORDSTORE_JSON_INDENT = max(int(indent), 0)
        except ValueError:
            self.RECORDSTORE_JSON_INDENT = 2

    @property
    def json_indent(self):
        """Indent argument for the JSON encoder (None when compact)."""
        return self.RECORDSTORE_JSON_INDENT or None

    def resolve_path(self, path) -> Path:
        """Resolve a store path against RECORDSTORE_DATA_DIR unless absolute."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.RECORDSTORE_DATA_DIR / p
