"""Unit tests – remotes map endpoints and payloads onto entities."""
from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from wooflux.kernel.errors import SerializationError
from wooflux.networking import AccountRemote, Credentials, OrdersRemote, ProductsRemote
from wooflux.testing import FakeNetwork


class TestAccountRemote:
    def test_load_sites_reads_sites_key(self) -> None:
        network = FakeNetwork(
            {("GET", "me/sites"): {"sites": [{"ID": 3, "URL": "https://a.test", "name": "A"}]}}
        )
        sites = asyncio.run(AccountRemote(network).load_sites())
        assert [(s.site_id, s.name) for s in sites] == [(3, "A")]

    def test_load_sites_rejects_non_list(self) -> None:
        network = FakeNetwork({("GET", "me/sites"): {"sites": "nope"}})
        with pytest.raises(SerializationError):
            asyncio.run(AccountRemote(network).load_sites())


class TestProductsRemote:
    def test_load_all_products_sends_paging(self) -> None:
        network = FakeNetwork(
            {("GET", "sites/5/wc/v3/products"): [{"id": 1, "name": "Mug", "price": "3.10"}]}
        )
        products = asyncio.run(
            ProductsRemote(network).load_all_products(5, page_number=2, page_size=10)
        )
        assert network.requests[0]["params"] == {"page": 2, "per_page": 10}
        assert products[0].site_id == 5
        assert products[0].price == Decimal("3.10")

    def test_delete_product_forces_removal(self) -> None:
        network = FakeNetwork({("DELETE", "sites/5/wc/v3/products/1"): {"id": 1, "name": "Mug"}})
        product = asyncio.run(ProductsRemote(network).delete_product(5, 1))
        assert product.product_id == 1
        assert network.requests[0]["params"] == {"force": "true"}


class TestOrdersRemote:
    def test_status_filter_is_optional(self) -> None:
        network = FakeNetwork({("GET", "sites/5/wc/v3/orders"): []})
        remote = OrdersRemote(network)
        asyncio.run(remote.load_all_orders(5))
        asyncio.run(remote.load_all_orders(5, status="on-hold"))
        assert "status" not in network.requests[0]["params"]
        assert network.requests[1]["params"]["status"] == "on-hold"

    def test_update_order_status(self) -> None:
        network = FakeNetwork(
            {("PUT", "sites/5/wc/v3/orders/9"): {"id": 9, "status": "completed", "total": "1"}}
        )
        order = asyncio.run(OrdersRemote(network).update_order_status(5, 9, "completed"))
        assert order.status == "completed"
        assert order.number == "9"
        assert network.requests[0]["json"] == {"status": "completed"}


class TestCredentials:
    def test_placeholder_username(self) -> None:
        credentials = Credentials.with_placeholder_username("token")
        assert credentials.has_placeholder_username()
        assert not credentials.copy(username="keeper").has_placeholder_username()

    def test_token_not_in_repr(self) -> None:
        assert "s3cret" not in repr(Credentials(username="keeper", auth_token="s3cret"))
