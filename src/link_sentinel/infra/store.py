"""Key/value state stores for settings and scan history."""

from __future__ import annotations

import json
from pathlib import Path

from link_sentinel.core.errors import StoreError
from link_sentinel.core.logging import get_logger

logger = get_logger(__name__)


class DictStore:
    def __init__(self) -> None:
        self._store: dict[str, object] = {}

    def get(self, key: str, default: object | None = None) -> object | None:
        return self._store.get(key, default)

    def set(self, key: str, value: object) -> None:
        self._store[key] = value


class JsonFileStore(DictStore):
    """DictStore persisted as a single JSON object, rewritten on every set."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path).expanduser()
        self._loaded = False

    def _load(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        if not self.path.exists():
            return
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as exc:
            raise StoreError(f"state file {self.path} is not valid json: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"state file {self.path} must hold a json object")
        self._store.update(payload)
        logger.debug("state_loaded", path=str(self.path), keys=sorted(payload))

    def get(self, key: str, default: object | None = None) -> object | None:
        self._load()
        return super().get(key, default)

    def set(self, key: str, value: object) -> None:
        self._load()
        super().set(key, value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Swap in a fully written file; the target is never left half-written.
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(self._store, ensure_ascii=True, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("state_saved", path=str(self.path), key=key)
