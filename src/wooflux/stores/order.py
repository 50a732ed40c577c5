"""OrderStore – orders of the selected site."""

from __future__ import annotations

from wooflux.actions import (
    Dispatcher,
    ResetStoredOrders,
    RetrieveOrder,
    SynchronizeOrders,
    UpdateOrderStatus,
)
from wooflux.kernel.errors import describe_error
from wooflux.kernel.types import Err, Ok
from wooflux.models import Order
from wooflux.models.paging import FIRST_PAGE_NUMBER
from wooflux.networking import Network, OrdersRemote
from wooflux.storage import StorageManager
from wooflux.stores.base import Store, handles
from wooflux.stores.tasks import TaskRunner


class OrderStore(Store):
    """State: ``last_synchronized`` – ``{site_id: order count}`` of the last first-page sync."""

    initial_state = {"last_synchronized": {}}

    def __init__(
        self,
        dispatcher: Dispatcher,
        storage_manager: StorageManager,
        network: Network,
        *,
        remote: OrdersRemote | None = None,
        tasks: TaskRunner | None = None,
    ) -> None:
        self._remote = remote or OrdersRemote(network)
        super().__init__(dispatcher, storage_manager, network, tasks=tasks)

    @handles(SynchronizeOrders)
    def _synchronize_orders(self, action: SynchronizeOrders) -> None:
        self.run(self._synchronize_orders_async(action), action)

    @handles(RetrieveOrder)
    def _retrieve_order(self, action: RetrieveOrder) -> None:
        self.run(self._retrieve_order_async(action), action)

    @handles(UpdateOrderStatus)
    def _update_order_status(self, action: UpdateOrderStatus) -> None:
        previous = self._stored_order(action.site_id, action.order_id)
        if previous is not None:
            self.storage_manager.upsert(previous.copy(status=action.status))
        self.run(self._update_order_status_async(action, previous), action)

    @handles(ResetStoredOrders)
    def _reset_stored_orders(self, action: ResetStoredOrders) -> None:
        removed = self.storage_manager.delete_where(Order)
        self._log.info("stored_orders_reset", removed=removed)
        self.update_state(last_synchronized={})
        action.on_completion()

    async def _synchronize_orders_async(self, action: SynchronizeOrders) -> None:
        try:
            orders = await self._remote.load_all_orders(
                action.site_id,
                status=action.status,
                page_number=action.page_number,
                page_size=action.page_size,
            )
            if action.page_number == FIRST_PAGE_NUMBER:
                self.storage_manager.delete_where(
                    Order,
                    lambda o: o.site_id == action.site_id
                    and (action.status is None or o.status == action.status),
                )
            self.storage_manager.upsert_all(orders)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "orders_sync_failed", site_id=action.site_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        if action.page_number == FIRST_PAGE_NUMBER:
            self.update_state(
                last_synchronized={**self._state["last_synchronized"], action.site_id: len(orders)}
            )
        action.on_completion(Ok(len(orders) >= action.page_size))

    async def _retrieve_order_async(self, action: RetrieveOrder) -> None:
        try:
            order = await self._remote.load_order(action.site_id, action.order_id)
            self.storage_manager.upsert(order)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "order_retrieve_failed", order_id=action.order_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        action.on_completion(Ok(order))

    async def _update_order_status_async(
        self, action: UpdateOrderStatus, previous: Order | None
    ) -> None:
        try:
            order = await self._remote.update_order_status(
                action.site_id, action.order_id, action.status
            )
            self.storage_manager.upsert(order)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "order_status_update_failed",
                order_id=action.order_id,
                status=action.status,
                error=describe_error(exc),
            )
            if previous is not None:
                self.storage_manager.upsert(previous)
            action.on_completion(Err(exc))
            return
        action.on_completion(Ok(order))

    def _stored_order(self, site_id: int, order_id: int) -> Order | None:
        return self.storage_manager.first(
            Order, lambda o: o.site_id == site_id and o.order_id == order_id
        )


__all__ = ["OrderStore"]
