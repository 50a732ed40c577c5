"""Storage – InMemoryStorageManager."""
from __future__ import annotations

import threading
from typing import Any

from wooflux.models.base import Entity
from wooflux.storage.port import Predicate, StorageManager, TEntity


class InMemoryStorageManager(StorageManager):
    """Dict-backed storage, safe to share between the loop and worker threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: dict[type[Entity], dict[tuple[Any, ...], Entity]] = {}

    def upsert(self, entity: Entity) -> None:
        with self._lock:
            self._rows.setdefault(type(entity), {})[entity.storage_key] = entity

    def delete(self, entity: Entity) -> None:
        with self._lock:
            self._rows.get(type(entity), {}).pop(entity.storage_key, None)

    def fetch(
        self,
        entity_type: type[TEntity],
        predicate: Predicate[TEntity] | None = None,
    ) -> list[TEntity]:
        with self._lock:
            rows = list(self._rows.get(entity_type, {}).values())
        rows.sort(key=lambda row: row.storage_key)
        return [row for row in rows if predicate is None or predicate(row)]  # type: ignore[misc]

    def reset(self) -> None:
        with self._lock:
            self._rows.clear()


__all__ = ["InMemoryStorageManager"]
