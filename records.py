# Best-score persistence: a keyed JSON file on disk, or a dict for tests.
from __future__ import annotations

import json
import logging
import os
from typing import Optional, Protocol


logger = logging.getLogger(__name__)

RECORD_KEY = "snakeRecord"


class RecordStore(Protocol):
    def get_record(self) -> Optional[int]: ...

    def set_record(self, score: int) -> None: ...


class MemoryRecordStore:
    """In-process store; nothing survives the session."""
    def __init__(self, record: Optional[int] = None, key: str = RECORD_KEY) -> None:
        self.key = key
        self.values: dict[str, int] = {}
        if record is not None:
            self.values[key] = record

    def get_record(self) -> Optional[int]:
        return self.values.get(self.key)

    def set_record(self, score: int) -> None:
        self.values[self.key] = int(score)


class JsonRecordStore:
    """Stores the record under a fixed key in a small JSON object file.

    Other keys already present in the file are preserved on write.
    """
    def __init__(self, path: str, key: str = RECORD_KEY) -> None:
        self.path = path
        self.key = key

    def _read(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as fh:
            try:
                payload = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Record file {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Record file {self.path} must hold a JSON object.")
        return payload

    def get_record(self) -> Optional[int]:
        raw = self._read().get(self.key)
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Record value {raw!r} in {self.path} is not an integer.") from exc

    def set_record(self, score: int) -> None:
        payload = self._read()
        payload[self.key] = int(score)

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh)
        os.replace(tmp_path, self.path)
        logger.debug("Saved record %d to %s", score, self.path)
