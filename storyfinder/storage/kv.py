"""Durable key/value stores used for persisted client values."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from storyfinder.config import StorageSettings
from storyfinder.db.models import Base, StoredValue
from storyfinder.logging import logger
from storyfinder.services.exceptions import StorageError


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None:
        """Return the stored string or ``None`` when the key is absent."""

    def set_item(self, key: str, value: str) -> None:
        """Durably store ``value`` under ``key``."""


class InMemoryStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class SqlKeyValueStore:
    """Lazy SQLAlchemy engine wrapper storing one row per key."""

    def __init__(
        self,
        settings: StorageSettings | None = None,
        *,
        engine: Engine | None = None,
    ) -> None:
        self.settings = settings or StorageSettings()
        self._engine = engine
        self._session_factory: sessionmaker[Session] | None = None

    def _ensure_engine(self) -> None:
        if self._session_factory is not None:
            return
        if self._engine is None:
            self._engine = create_engine(self.settings.dsn, echo=self.settings.echo)
        Base.metadata.create_all(self._engine)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        logger.info("kv_store_initialized", dsn=self.settings.dsn)

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._ensure_engine()
        assert self._session_factory is not None
        return self._session_factory

    def get_item(self, key: str) -> str | None:
        try:
            with self.session_factory() as session:
                stmt = select(StoredValue.value).where(StoredValue.key == key)
                return session.execute(stmt).scalar_one_or_none()
        except (SQLAlchemyError, ImportError) as exc:
            raise StorageError(f"Failed to read '{key}': {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as session, session.begin():
                stmt = select(StoredValue).where(StoredValue.key == key)
                row = session.execute(stmt).scalar_one_or_none()
                if row is None:
                    session.add(StoredValue(key=key, value=value))
                else:
                    row.value = value
        except (SQLAlchemyError, ImportError) as exc:
            raise StorageError(f"Failed to write '{key}': {exc}") from exc

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()


__all__ = ["InMemoryStore", "KeyValueStore", "SqlKeyValueStore"]
