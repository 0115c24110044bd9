# File: store.py
"""Key-value persistence for the Stellar Missions engine.

The mission engine only talks to the `PreferencesStore` protocol (get, set,
has, delete, keys, save). Two implementations live here:

- MemoryPreferencesStore: dict-backed, used by tests and headless tools.
- JsonPreferencesStore: one JSON object on disk, written through on every
  mutation so a write is visible to the next read and survives a crash.

The same store is shared with unrelated subsystems (currency, unlocks,
settings), so nothing here assumes it owns every key.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from typing import Any

from . import const


class MemoryPreferencesStore:
    """In-memory key-value store with the PreferencesStore interface."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Optional starting contents (copied).
        """
        self._data: dict[str, Any] = dict(initial or {})
        self.save_count = 0

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under `key`, or `default`."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`."""
        self._data[key] = value

    def has(self, key: str) -> bool:
        """Check whether `key` exists."""
        return key in self._data

    def delete(self, key: str) -> None:
        """Remove `key` if present."""
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        """List all stored keys."""
        return list(self._data)

    def save(self) -> None:
        """No-op flush (kept for interface parity)."""
        self.save_count += 1

    @property
    def data(self) -> dict[str, Any]:
        """Retrieve the in-memory data (for inspection in tests)."""
        return self._data


class JsonPreferencesStore:
    """Handles persistent key-value storage in a single JSON file.

    The whole file is loaded once at construction. Every `set` and `delete`
    rewrites the file atomically (temporary file + rename).
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize the store and load existing data.

        Args:
            path: Location of the JSON file. Parent directories are created
                on first save.
        """
        self._path = Path(path)
        self._data: dict[str, Any] = {}
        self._dirty = False
        self._load()

    def _load(self) -> None:
        """Load data from disk during startup.

        If no file exists, or it cannot be read, starts with an empty store.
        """
        const.LOGGER.debug("JsonPreferencesStore: Loading data from %s", self._path)
        if not self._path.exists():
            const.LOGGER.info(
                "INFO: No existing preferences file found at %s. Starting empty",
                self._path,
            )
            return

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to read preferences file %s: %s. Starting empty",
                self._path,
                err,
            )
            return
        except (ValueError, RecursionError) as err:
            const.LOGGER.error(
                "ERROR: Preferences file %s is not valid JSON: %s. Starting empty",
                self._path,
                err,
            )
            return

        if not isinstance(raw, dict):
            const.LOGGER.error(
                "ERROR: Preferences file %s does not contain an object. Starting empty",
                self._path,
            )
            return

        self._data = raw
        const.LOGGER.debug(
            "JsonPreferencesStore: Loaded %s keys from %s", len(self._data), self._path
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under `key`, or `default`."""
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store `value` under `key` and write through to disk."""
        self._data[key] = value
        self._dirty = True
        self.save()

    def has(self, key: str) -> bool:
        """Check whether `key` exists."""
        return key in self._data

    def delete(self, key: str) -> None:
        """Remove `key` if present and write through to disk."""
        if key in self._data:
            del self._data[key]
            self._dirty = True
            self.save()

    def keys(self) -> list[str]:
        """List all stored keys."""
        return list(self._data)

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def save(self) -> None:
        """Write the current data to disk.

        Does nothing when every change is already on disk.

        Raises:
            No exceptions raised - errors are logged but do not stop execution.
            OSError: Logged when file system issues prevent saving.
            TypeError: Logged when data contains non-serializable types.
            ValueError: Logged when data is invalid for JSON serialization.
        """
        if not self._dirty:
            return

        try:
            payload = json.dumps(self._data, indent=2, sort_keys=True)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self._path)
                self._dirty = False
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to save preferences due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                self._path,
            )
        except TypeError as err:
            const.LOGGER.error(
                "ERROR: Failed to save preferences due to non-serializable data: %s",
                err,
            )
        except ValueError as err:
            const.LOGGER.error(
                "ERROR: Failed to save preferences due to invalid data format: %s",
                err,
            )
