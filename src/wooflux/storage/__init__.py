"""Storage – persistence port and its implementations."""
from wooflux.storage.memory import InMemoryStorageManager
from wooflux.storage.port import Predicate, StorageManager
from wooflux.storage.sqlalchemy import SqlAlchemyStorageManager

__all__ = ["InMemoryStorageManager", "Predicate", "SqlAlchemyStorageManager", "StorageManager"]
