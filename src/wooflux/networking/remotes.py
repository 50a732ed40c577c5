"""Remotes – endpoint paths and payload mapping over a :class:`Network`."""

from __future__ import annotations

from typing import Any

from wooflux.kernel.errors import SerializationError
from wooflux.models import Account, Order, Product, Site
from wooflux.models.paging import DEFAULT_PAGE_SIZE, FIRST_PAGE_NUMBER
from wooflux.networking.network import Network


def _as_list(payload: Any, entity: str) -> list[Any]:
    if not isinstance(payload, list):
        raise SerializationError(f"Expected a list of {entity}", payload_type=entity)
    return payload


class Remote:
    """Base for remotes; holds the shared network."""

    def __init__(self, network: Network) -> None:
        self._network = network


class AccountRemote(Remote):
    async def load_account(self) -> Account:
        return Account.from_payload(await self._network.request("GET", "me"))

    async def load_sites(self) -> list[Site]:
        payload = await self._network.request("GET", "me/sites")
        sites = payload.get("sites") if isinstance(payload, dict) else payload
        return [Site.from_payload(item) for item in _as_list(sites, "Site")]


class ProductsRemote(Remote):
    def _path(self, site_id: int, *parts: object) -> str:
        return "/".join([f"sites/{site_id}/wc/v3/products", *map(str, parts)])

    async def load_all_products(
        self,
        site_id: int,
        page_number: int = FIRST_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Product]:
        payload = await self._network.request(
            "GET", self._path(site_id), params={"page": page_number, "per_page": page_size}
        )
        return [Product.from_payload(site_id, item) for item in _as_list(payload, "Product")]

    async def load_product(self, site_id: int, product_id: int) -> Product:
        payload = await self._network.request("GET", self._path(site_id, product_id))
        return Product.from_payload(site_id, payload)

    async def delete_product(self, site_id: int, product_id: int) -> Product:
        payload = await self._network.request(
            "DELETE", self._path(site_id, product_id), params={"force": "true"}
        )
        return Product.from_payload(site_id, payload)


class OrdersRemote(Remote):
    def _path(self, site_id: int, *parts: object) -> str:
        return "/".join([f"sites/{site_id}/wc/v3/orders", *map(str, parts)])

    async def load_all_orders(
        self,
        site_id: int,
        status: str | None = None,
        page_number: int = FIRST_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[Order]:
        params: dict[str, Any] = {"page": page_number, "per_page": page_size}
        if status is not None:
            params["status"] = status
        payload = await self._network.request("GET", self._path(site_id), params=params)
        return [Order.from_payload(site_id, item) for item in _as_list(payload, "Order")]

    async def load_order(self, site_id: int, order_id: int) -> Order:
        payload = await self._network.request("GET", self._path(site_id, order_id))
        return Order.from_payload(site_id, payload)

    async def update_order_status(self, site_id: int, order_id: int, status: str) -> Order:
        payload = await self._network.request(
            "PUT", self._path(site_id, order_id), json={"status": status}
        )
        return Order.from_payload(site_id, payload)


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FIRST_PAGE_NUMBER",
    "AccountRemote",
    "OrdersRemote",
    "ProductsRemote",
    "Remote",
]
