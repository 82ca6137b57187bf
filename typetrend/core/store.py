from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Tuple

from typetrend import config
from typetrend.core.errors import StorageCorruptError, StorageWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionRecord:
    timestamp: int
    wpm: float
    accuracy_percent: float

    def to_json(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "wpm": self.wpm, "accuracy": self.accuracy_percent}


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class FileBackend:
    """Stores each slot as ``<directory>/<key>.json``.

    Writes go to a temp file that replaces the slot file in one step, so a
    reader sees either the previous or the new contents.
    """

    def __init__(self, directory: Path = config.DATA_DIR) -> None:
        self._directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class MemoryBackend:
    """In-memory backend for tests and throwaway runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.slots: Dict[str, str] = dict(initial or {})
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError(f"write to {key!r} refused")
        self.slots[key] = value


def _number(item: Dict[str, Any], field: str) -> float:
    value = item.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {field!r} is not a number: {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"field {field!r} is not finite: {value!r}")
    return value


def parse_records(payload: str) -> List[SessionRecord]:
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError("expected a list of session records")
    records: List[SessionRecord] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"record {index} is not an object")
        timestamp = _number(item, "timestamp")
        if timestamp != int(timestamp):
            raise ValueError(f"record {index} has a fractional timestamp")
        records.append(
            SessionRecord(
                timestamp=int(timestamp),
                wpm=float(_number(item, "wpm")),
                accuracy_percent=float(_number(item, "accuracy")),
            )
        )
    return records


def dump_records(records: List[SessionRecord]) -> str:
    return json.dumps([record.to_json() for record in records])


class SessionStore:
    """Append-only log of completed sessions kept under one persistence slot."""

    def __init__(self, backend: KeyValueBackend, key: str = config.SESSIONS_KEY) -> None:
        self._backend = backend
        self._key = key
        self._records: List[SessionRecord] = []

    @property
    def records(self) -> Tuple[SessionRecord, ...]:
        return tuple(self._records)

    def load(self) -> List[SessionRecord]:
        """Read the full log. Falls back to an empty history when it is unreadable."""
        self._records = []
        try:
            payload = self._backend.get(self._key)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageCorruptError(self._key, f"could not read session log: {exc}") from exc
        if payload is None:
            return []
        try:
            records = parse_records(payload)
        except (ValueError, TypeError) as exc:
            raise StorageCorruptError(self._key, f"malformed session log: {exc}") from exc
        self._records = records
        return list(records)

    def load_or_empty(self) -> Tuple[List[SessionRecord], Optional[StorageCorruptError]]:
        try:
            return self.load(), None
        except StorageCorruptError as e:
            logger.warning("Ignoring stored session history: %s", e)
            return [], e

    def append(self, record: SessionRecord) -> None:
        self._records.append(record)
        try:
            self._backend.set(self._key, dump_records(self._records))
        except OSError as exc:
            logger.warning("Could not save session log to %s: %s", self._key, exc)
            raise StorageWriteError(self._key, f"session not saved: {exc}") from exc
