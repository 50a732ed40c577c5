"""Unit tests for the Mall aggregator."""

from __future__ import annotations

import gc
import logging
from typing import Any

import pytest
import structlog

from wooflux.actions import AccountAction, LoadSite, ResetStoredOrders, ResetStoredProducts
from wooflux.config import WoofluxSettings
from wooflux.context import StoresContext, build_context, build_storage
from wooflux.mall import DEFAULT_STORE_TYPES, Mall
from wooflux.models import Site
from wooflux.storage import InMemoryStorageManager, SqlAlchemyStorageManager
from wooflux.stores import AccountStore, OrderStore, ProductStore
from wooflux.testing import FakeNetwork


def make_context() -> StoresContext:
    return StoresContext(
        settings=WoofluxSettings(),
        storage_manager=InMemoryStorageManager(),
        network_factory=lambda credentials: FakeNetwork(),
    )


class TestMall:
    def test_one_instance_of_every_store(self) -> None:
        mall = Mall(make_context(), FakeNetwork())
        assert [type(s) for s in mall.stores] == list(DEFAULT_STORE_TYPES)
        assert isinstance(mall.store(ProductStore), ProductStore)

    def test_stores_are_registered_for_their_categories(self) -> None:
        mall = Mall(make_context(), FakeNetwork())
        account_store = mall.store(AccountStore)
        assert mall.dispatcher.processors_for(AccountAction) == [account_store]

    def test_dispatch_reaches_the_owning_store(self) -> None:
        context = make_context()
        site = Site(site_id=4, name="Shop", url="https://shop.test")
        context.storage_manager.upsert(site)
        mall = Mall(context, FakeNetwork())
        loaded: list[Any] = []

        mall.dispatch(LoadSite(site_id=4, on_completion=loaded.append))

        assert loaded == [site]

    def test_dispatch_all_keeps_order(self) -> None:
        mall = Mall(make_context(), FakeNetwork())
        calls: list[str] = []
        mall.dispatch_all(
            [
                ResetStoredOrders(on_completion=lambda: calls.append("orders")),
                ResetStoredProducts(on_completion=lambda: calls.append("products")),
            ]
        )
        assert calls == ["orders", "products"]

    def test_store_subset(self) -> None:
        mall = Mall(make_context(), FakeNetwork(), store_types=(OrderStore,))
        calls: list[str] = []
        mall.dispatch(ResetStoredProducts(on_completion=lambda: calls.append("products")))
        assert calls == []

    def test_stores_die_with_the_mall(self) -> None:
        mall = Mall(make_context(), FakeNetwork())
        dispatcher = mall.dispatcher
        del mall
        gc.collect()
        assert dispatcher.processors_for(AccountAction) == []


class TestBuildContext:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_default_backend_is_memory(self) -> None:
        context = build_context(WoofluxSettings())
        assert isinstance(context.storage_manager, InMemoryStorageManager)

    def test_logging_follows_settings(self) -> None:
        build_context(WoofluxSettings(log_level="warning", log_json=False))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        [handler] = root.handlers
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(handler.formatter.processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_rendering_by_default(self) -> None:
        build_context(WoofluxSettings())
        [handler] = logging.getLogger().handlers
        assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)

    def test_host_owned_logging_is_left_alone(self) -> None:
        root = logging.getLogger()
        sentinel = logging.NullHandler()
        root.addHandler(sentinel)
        build_context(WoofluxSettings(), setup_logging=False)
        assert sentinel in root.handlers

    def test_sqlalchemy_backend(self) -> None:
        storage = build_storage(WoofluxSettings(storage_backend="sqlalchemy", storage_url="sqlite://"))
        assert isinstance(storage, SqlAlchemyStorageManager)
