"""A string value restored from a key/value store and re-persisted on change."""

from __future__ import annotations

from storyfinder.logging import logger
from storyfinder.services.exceptions import StorageError
from storyfinder.storage.kv import KeyValueStore


class PersistedValue:
    """Reads ``key`` once at construction and writes through on every ``set``.

    Storage failures never reach the caller: the in-memory value is kept and
    the failure is logged.
    """

    def __init__(self, store: KeyValueStore, key: str, default: str) -> None:
        self._store = store
        self._key = key
        self._value = self._load(default)

    @property
    def key(self) -> str:
        return self._key

    def _load(self, default: str) -> str:
        try:
            stored = self._store.get_item(self._key)
        except StorageError as exc:
            logger.warning("persisted_value_read_failed", key=self._key, error=str(exc))
            return default
        return default if stored is None else stored

    def get(self) -> str:
        return self._value

    def set(self, value: str) -> None:
        self._value = value
        try:
            self._store.set_item(self._key, value)
        except StorageError as exc:
            logger.warning("persisted_value_write_failed", key=self._key, error=str(exc))


__all__ = ["PersistedValue"]
