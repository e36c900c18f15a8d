"""
Key-value persistence backends for user data.

The interaction store only needs a synchronous get/set/delete interface;
these are the two implementations shipped with the app.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

# Default user data file
USER_DATA_FILE = Path.home() / ".critical_mind" / "user_data.json"


class KeyValueBackend(Protocol):
    """Synchronous key-value storage."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...


class MemoryBackend:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None


class JsonFileBackend:
    """
    Stores all keys in a single JSON document.

    Writes go to a temp file that is then renamed over the target, so a
    crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path is not None else USER_DATA_FILE

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Corrupted user data at {self.path}: {e}. Starting empty.")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Unexpected user data format at {self.path}. Starting empty.")
            return {}
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(temp_path, self.path)
            logger.debug(f"User data saved to {self.path}")
        except OSError as e:
            logger.error(f"Failed to save user data: {e}")
            if temp_path.exists():
                temp_path.unlink()
            raise

    def get(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> bool:
        data = self._read_all()
        if key not in data:
            return False
        del data[key]
        self._write_all(data)
        return True
