"""
Trip Storage Service.
Keeps the trip collection as one JSON array under a single key of a
key-value store, the way the browser form kept it in local storage.
"""
import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from ..models.trip import Trip

logger = logging.getLogger(__name__)

_TRIP_LIST = TypeAdapter(list[Trip])


class StorageError(Exception):
    """Raised when the backing store cannot be written."""


class KeyValueStore(Protocol):
    """String-to-string store with local-storage semantics."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore:
    """
    Store backed by one JSON object file mapping keys to string values.

    The file is read on first access and rewritten in full on every
    change, through a temporary file so a crash never leaves half a file.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._items: Optional[dict[str, str]] = None

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items

        items: dict[str, str] = {}
        if self.path.exists():
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read storage file {self.path}: {e}")
                raw = {}
            if isinstance(raw, dict):
                items = {k: v for k, v in raw.items() if isinstance(v, str)}
            else:
                logger.warning(f"Storage file {self.path} is not a JSON object, ignoring it")

        self._items = items
        return items

    def _flush(self, items: dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not write storage file {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = dict(self._load())
        items[key] = value
        self._flush(items)
        self._items = items

    def remove_item(self, key: str) -> None:
        items = dict(self._load())
        if items.pop(key, None) is not None:
            self._flush(items)
            self._items = items


class TripRepository:
    """Loads and saves the full trip collection under one storage key."""

    def __init__(self, store: KeyValueStore, key: str = "trips"):
        self.store = store
        self.key = key

    def load(self) -> list[Trip]:
        """
        Read the persisted collection.

        A missing key gives an empty collection. So does unreadable data:
        the corrupt value is logged and dropped, it is not repaired.
        """
        raw = self.store.get_item(self.key)
        if raw is None:
            return []

        try:
            return _TRIP_LIST.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Dropping unreadable trip collection under '{self.key}': "
                f"{e.error_count()} validation error(s)"
            )
            return []

    def save(self, trips: list[Trip]) -> None:
        """Serialize the whole collection, replacing what was stored."""
        payload = json.dumps([trip.to_storage_dict() for trip in trips], ensure_ascii=False)
        self.store.set_item(self.key, payload)
        logger.debug(f"Saved {len(trips)} trip(s) under '{self.key}'")


def get_trip_repository() -> TripRepository:
    """Build the repository for the configured storage backend."""
    from ..config import get_storage_config
    config = get_storage_config()

    if config["backend"] == "memory":
        store: KeyValueStore = MemoryKeyValueStore()
    else:
        store = JsonFileKeyValueStore(config["path"])
    return TripRepository(store, key=config["key"])
