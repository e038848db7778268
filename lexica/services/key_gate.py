from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import MutableMapping
from enum import Enum
from pathlib import Path
from typing import Iterator

from ..config import API_KEY_STORAGE_KEY
from ..errors import ValidationError

logger = logging.getLogger(__name__)


class GateState(str, Enum):
    NO_KEY = "no_key"
    KEY_ENTRY = "key_entry"
    READY = "ready"


class JsonFileStorage(MutableMapping):
    """String key/value storage persisted as one JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Ignoring unreadable key storage %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring key storage %s: expected a JSON object", self.path)
            return {}
        return {str(key): str(value) for key, value in raw.items()}

    def _save(self, data: dict[str, str]) -> None:
        # Owner-only, and swapped in whole so a crash never leaves half a file.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def __getitem__(self, key: str) -> str:
        return self._load()[key]

    def __setitem__(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def __delitem__(self, key: str) -> None:
        data = self._load()
        del data[key]
        self._save(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())


class KeyGate:
    """Tracks whether a usable API key exists: ``no_key -> key_entry -> ready``.

    Storage is read once in ``start``; afterwards the gate is the only reader
    and writer of the stored key.
    """

    def __init__(self, storage: MutableMapping, storage_key: str = API_KEY_STORAGE_KEY):
        self.storage = storage
        self.storage_key = storage_key
        self.state = GateState.NO_KEY
        self._api_key: str | None = None

    def start(self) -> GateState:
        stored = self.storage.get(self.storage_key)
        if stored:
            self._api_key = stored
            self.state = GateState.READY
        else:
            self._api_key = None
            self.state = GateState.NO_KEY
        return self.state

    def begin_entry(self) -> GateState:
        self.state = GateState.KEY_ENTRY
        return self.state

    def submit(self, api_key: str | None) -> GateState:
        self.state = GateState.KEY_ENTRY
        cleaned = (api_key or "").strip()
        if not cleaned:
            raise ValidationError("API Key cannot be empty.")
        self.storage[self.storage_key] = cleaned
        self._api_key = cleaned
        self.state = GateState.READY
        logger.info("API key saved")
        return self.state

    def clear(self) -> GateState:
        self.storage.pop(self.storage_key, None)
        self._api_key = None
        self.state = GateState.NO_KEY
        return self.state

    @property
    def api_key(self) -> str | None:
        if self.state is not GateState.READY:
            return None
        return self._api_key


__all__ = ["GateState", "JsonFileStorage", "KeyGate"]
