"""ProductAction – product synchronization and local storage."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable

from wooflux.actions.action import Action
from wooflux.kernel.types import Result
from wooflux.models import Product
from wooflux.models.paging import DEFAULT_PAGE_SIZE, FIRST_PAGE_NUMBER


class ProductAction(Action):
    """Category for actions handled by the product store."""


@dataclasses.dataclass(frozen=True, kw_only=True)
class SynchronizeProducts(ProductAction):
    """Fetch one page of products; completion receives whether a next page may exist."""

    site_id: int
    page_number: int = FIRST_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    on_completion: Callable[[Result[bool, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class RetrieveProduct(ProductAction):
    site_id: int
    product_id: int
    on_completion: Callable[[Result[Product, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class DeleteProduct(ProductAction):
    site_id: int
    product_id: int
    on_completion: Callable[[Result[Product, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class UpsertProduct(ProductAction):
    """Decode a raw product payload and store it."""

    site_id: int
    payload: Mapping[str, Any]
    on_completion: Callable[[Result[Product, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class ResetStoredProducts(ProductAction):
    on_completion: Callable[[], None]


__all__ = [
    "DeleteProduct",
    "ProductAction",
    "ResetStoredProducts",
    "RetrieveProduct",
    "SynchronizeProducts",
    "UpsertProduct",
]
