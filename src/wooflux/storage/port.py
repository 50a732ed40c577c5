"""Storage port – persistence collaborator used by the stores."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from typing import TypeVar

from wooflux.models.base import Entity

TEntity = TypeVar("TEntity", bound=Entity)

#: Filter applied to stored entities of one type.
Predicate = Callable[[TEntity], bool]


class StorageManager(abc.ABC):
    """Port: durable CRUD over read-only entities, keyed by ``storage_key``.

    Implementations live in :mod:`wooflux.storage.memory` and
    :mod:`wooflux.storage.sqlalchemy`.
    """

    @abc.abstractmethod
    def upsert(self, entity: Entity) -> None:
        """Insert *entity* or replace the stored one with the same key."""

    def upsert_all(self, entities: Iterable[Entity]) -> None:
        for entity in entities:
            self.upsert(entity)

    @abc.abstractmethod
    def delete(self, entity: Entity) -> None:
        """Remove the stored entity sharing *entity*'s key; missing rows are ignored."""

    @abc.abstractmethod
    def fetch(
        self,
        entity_type: type[TEntity],
        predicate: Predicate[TEntity] | None = None,
    ) -> list[TEntity]:
        """Return stored entities of *entity_type* ordered by ``storage_key``, filtered by *predicate*."""

    def first(
        self,
        entity_type: type[TEntity],
        predicate: Predicate[TEntity] | None = None,
    ) -> TEntity | None:
        matches = self.fetch(entity_type, predicate)
        return matches[0] if matches else None

    def delete_where(
        self,
        entity_type: type[TEntity],
        predicate: Predicate[TEntity] | None = None,
    ) -> int:
        """Delete every matching entity and return how many were removed."""
        matches = self.fetch(entity_type, predicate)
        for entity in matches:
            self.delete(entity)
        return len(matches)

    @abc.abstractmethod
    def reset(self) -> None:
        """Drop every stored entity."""


__all__ = ["Predicate", "StorageManager"]
