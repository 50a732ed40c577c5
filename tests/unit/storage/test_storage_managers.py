"""Unit tests for the storage managers (in-memory and SQLAlchemy on SQLite)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import create_engine

from wooflux.kernel.errors import ConnectionError
from wooflux.models import Account, Order, Product, Site
from wooflux.storage import InMemoryStorageManager, SqlAlchemyStorageManager, StorageManager
from wooflux.storage.sqlalchemy import StoredEntity


@pytest.fixture(params=["memory", "sqlalchemy"])
def storage(request: pytest.FixtureRequest) -> StorageManager:
    if request.param == "memory":
        return InMemoryStorageManager()
    return SqlAlchemyStorageManager.from_url("sqlite://")


def _product(product_id: int, site_id: int = 1, price: str = "9.99") -> Product:
    return Product(site_id=site_id, product_id=product_id, name=f"P{product_id}", price=Decimal(price))


class TestStorageManagerContract:
    def test_fetch_empty(self, storage: StorageManager) -> None:
        assert storage.fetch(Product) == []
        assert storage.first(Product) is None

    def test_upsert_and_fetch_roundtrip_keeps_types(self, storage: StorageManager) -> None:
        product = Product(
            site_id=1,
            product_id=5,
            name="Mug",
            price=Decimal("12.50"),
            variations=(7, 8),
        )
        storage.upsert(product)
        [stored] = storage.fetch(Product)
        assert stored == product
        assert isinstance(stored.price, Decimal)
        assert stored.variations == (7, 8)

    def test_upsert_replaces_row_with_same_key(self, storage: StorageManager) -> None:
        storage.upsert(_product(1, price="1"))
        storage.upsert(_product(1, price="2"))
        assert [p.price for p in storage.fetch(Product)] == [Decimal("2")]

    def test_same_id_on_different_sites_are_distinct(self, storage: StorageManager) -> None:
        storage.upsert_all([_product(1, site_id=1), _product(1, site_id=2)])
        assert len(storage.fetch(Product)) == 2

    def test_entity_types_are_isolated(self, storage: StorageManager) -> None:
        storage.upsert(Account(user_id=1, username="a"))
        storage.upsert(Site(site_id=1, name="s", url="https://s"))
        assert storage.fetch(Account) == [Account(user_id=1, username="a")]
        assert len(storage.fetch(Site)) == 1

    def test_fetch_with_predicate(self, storage: StorageManager) -> None:
        storage.upsert_all([_product(1, site_id=1), _product(2, site_id=2)])
        assert [p.product_id for p in storage.fetch(Product, lambda p: p.site_id == 2)] == [2]

    def test_fetch_orders_by_storage_key(self, storage: StorageManager) -> None:
        storage.upsert_all([_product(10), _product(2), _product(1, site_id=3)])
        assert [p.storage_key for p in storage.fetch(Product)] == [(1, 2), (1, 10), (3, 1)]
        assert storage.first(Product).product_id == 2

    def test_delete_missing_row_is_ignored(self, storage: StorageManager) -> None:
        storage.delete(_product(99))
        assert storage.fetch(Product) == []

    def test_delete_where_returns_count(self, storage: StorageManager) -> None:
        storage.upsert_all([_product(1), _product(2), _product(3, site_id=2)])
        assert storage.delete_where(Product, lambda p: p.site_id == 1) == 2
        assert [p.product_id for p in storage.fetch(Product)] == [3]

    def test_reset_drops_everything(self, storage: StorageManager) -> None:
        storage.upsert(_product(1))
        storage.upsert(Order(site_id=1, order_id=1, number="1", status="pending"))
        storage.reset()
        assert storage.fetch(Product) == []
        assert storage.fetch(Order) == []


class TestSqlAlchemyStorageManager:
    def test_sessions_share_in_memory_database(self) -> None:
        storage = SqlAlchemyStorageManager.from_url("sqlite:///:memory:")
        storage.upsert(_product(1))
        assert storage.first(Product) == _product(1)

    def test_driver_errors_are_mapped(self) -> None:
        engine = create_engine("sqlite://")
        storage = SqlAlchemyStorageManager(engine)
        with engine.begin() as conn:
            conn.exec_driver_sql("DROP TABLE stored_entities")
        with pytest.raises(ConnectionError) as exc_info:
            storage.upsert(_product(1))
        assert exc_info.value.resource == "storage"

    def test_failed_operation_rolls_back(self) -> None:
        storage = SqlAlchemyStorageManager.from_url("sqlite://")
        with pytest.raises(RuntimeError):
            with storage._session() as session:
                session.add(
                    StoredEntity(entity_type="x", entity_key="[1]", payload={"name": "pending"})
                )
                session.flush()
                raise RuntimeError("abort")
        with storage._session() as session:
            assert session.get(StoredEntity, ("x", "[1]")) is None
