"""OrderAction – order synchronization and status updates."""

from __future__ import annotations

import dataclasses
from typing import Callable

from wooflux.actions.action import Action
from wooflux.kernel.types import Result
from wooflux.models import Order
from wooflux.models.paging import DEFAULT_PAGE_SIZE, FIRST_PAGE_NUMBER


class OrderAction(Action):
    """Category for actions handled by the order store."""


@dataclasses.dataclass(frozen=True, kw_only=True)
class SynchronizeOrders(OrderAction):
    site_id: int
    status: str | None = None
    page_number: int = FIRST_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    on_completion: Callable[[Result[bool, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class RetrieveOrder(OrderAction):
    site_id: int
    order_id: int
    on_completion: Callable[[Result[Order, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class UpdateOrderStatus(OrderAction):
    site_id: int
    order_id: int
    status: str
    on_completion: Callable[[Result[Order, Exception]], None]


@dataclasses.dataclass(frozen=True, kw_only=True)
class ResetStoredOrders(OrderAction):
    on_completion: Callable[[], None]


__all__ = [
    "OrderAction",
    "ResetStoredOrders",
    "RetrieveOrder",
    "SynchronizeOrders",
    "UpdateOrderStatus",
]
