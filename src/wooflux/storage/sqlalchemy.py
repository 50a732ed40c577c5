"""Storage – SqlAlchemyStorageManager.

Entities are stored as JSON documents in a single ``stored_entities`` table
keyed by ``(entity_type, entity_key)``.
"""
from __future__ import annotations

import contextlib
import json
from collections.abc import Iterator
from typing import Any

from sqlalchemy import JSON, String, create_engine, delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from wooflux.kernel.errors import ConnectionError
from wooflux.models.base import Entity
from wooflux.observability.logging import get_logger
from wooflux.storage.port import Predicate, StorageManager, TEntity

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class StoredEntity(Base):
    __tablename__ = "stored_entities"

    entity_type: Mapped[str] = mapped_column(String(128), primary_key=True)
    entity_key: Mapped[str] = mapped_column(String(256), primary_key=True)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON)


def _type_name(entity_type: type[Entity]) -> str:
    return f"{entity_type.__module__}.{entity_type.__qualname__}"


def _key(entity: Entity) -> str:
    return json.dumps(list(entity.storage_key), default=str)


class SqlAlchemyStorageManager(StorageManager):
    """SQLAlchemy-backed storage; one short session per operation."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        Base.metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str) -> "SqlAlchemyStorageManager":
        if url in ("sqlite://", "sqlite:///:memory:"):
            # in-memory SQLite lives per connection; share one across sessions
            engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(url)
        return cls(engine)

    def upsert(self, entity: Entity) -> None:
        with self._session() as session:
            session.merge(
                StoredEntity(
                    entity_type=_type_name(type(entity)),
                    entity_key=_key(entity),
                    payload=entity.to_dict(),
                )
            )

    def delete(self, entity: Entity) -> None:
        with self._session() as session:
            session.execute(
                delete(StoredEntity).where(
                    StoredEntity.entity_type == _type_name(type(entity)),
                    StoredEntity.entity_key == _key(entity),
                )
            )

    def fetch(
        self,
        entity_type: type[TEntity],
        predicate: Predicate[TEntity] | None = None,
    ) -> list[TEntity]:
        with self._session() as session:
            rows = session.scalars(
                select(StoredEntity).where(StoredEntity.entity_type == _type_name(entity_type))
            ).all()
            entities = [entity_type.from_dict(row.payload) for row in rows]
        entities.sort(key=lambda e: e.storage_key)
        return [e for e in entities if predicate is None or predicate(e)]

    def reset(self) -> None:
        with self._session() as session:
            session.execute(delete(StoredEntity))

    @contextlib.contextmanager
    def _session(self) -> Iterator[Session]:
        """One session per operation: commit on success, roll back and map driver errors otherwise."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("storage_operation_failed", error=str(exc))
            raise ConnectionError("storage", str(exc), cause=exc) from exc
        except BaseException:
            session.rollback()
            raise
        finally:
            session.close()


__all__ = ["SqlAlchemyStorageManager", "StoredEntity"]
