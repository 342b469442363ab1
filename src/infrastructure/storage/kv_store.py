"""
Durable key-value storage with string values, shaped like browser localStorage.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from src.utils.logger import get_logger

logger = get_logger()


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Dict-backed store. Set `fail_writes` to make every write raise OSError."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})
        self.fail_writes = False

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("storage is read-only")
        self.data[key] = value


class JsonFileStore:
    """
    All keys live in one JSON object file. Writes go to a temp file and are
    moved into place so a crash never leaves a half-written file.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        with open(self._path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; ignoring it", self._path)
            return {}
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        val = self._read_all().get(key)
        return val if isinstance(val, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Storage file %s unreadable, rewriting it: %s", self._path, e)
            data = {}
        data[key] = value
        self._write_all(data)
