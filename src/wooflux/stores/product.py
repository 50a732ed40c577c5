"""ProductStore – products of the selected site."""

from __future__ import annotations

from wooflux.actions import (
    DeleteProduct,
    Dispatcher,
    ResetStoredProducts,
    RetrieveProduct,
    SynchronizeProducts,
    UpsertProduct,
)
from wooflux.kernel.errors import describe_error
from wooflux.kernel.types import Err, Ok
from wooflux.models import Product
from wooflux.models.paging import FIRST_PAGE_NUMBER
from wooflux.networking import Network, ProductsRemote
from wooflux.storage import StorageManager
from wooflux.stores.base import Store, handles
from wooflux.stores.tasks import TaskRunner


class ProductStore(Store):
    """State: ``synchronizing`` – ids of the sites with a page sync in flight."""

    initial_state = {"synchronizing": frozenset()}

    def __init__(
        self,
        dispatcher: Dispatcher,
        storage_manager: StorageManager,
        network: Network,
        *,
        remote: ProductsRemote | None = None,
        tasks: TaskRunner | None = None,
    ) -> None:
        self._remote = remote or ProductsRemote(network)
        super().__init__(dispatcher, storage_manager, network, tasks=tasks)

    @handles(SynchronizeProducts)
    def _synchronize_products(self, action: SynchronizeProducts) -> None:
        self.run(self._synchronize_products_async(action), action)
        self._set_synchronizing(action.site_id, True)

    @handles(RetrieveProduct)
    def _retrieve_product(self, action: RetrieveProduct) -> None:
        self.run(self._retrieve_product_async(action), action)

    @handles(DeleteProduct)
    def _delete_product(self, action: DeleteProduct) -> None:
        self.run(self._delete_product_async(action), action)

    @handles(UpsertProduct)
    def _upsert_product(self, action: UpsertProduct) -> None:
        try:
            product = Product.from_payload(action.site_id, action.payload)
            self.storage_manager.upsert(product)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "product_upsert_failed", site_id=action.site_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        action.on_completion(Ok(product))

    @handles(ResetStoredProducts)
    def _reset_stored_products(self, action: ResetStoredProducts) -> None:
        removed = self.storage_manager.delete_where(Product)
        self._log.info("stored_products_reset", removed=removed)
        action.on_completion()

    async def _synchronize_products_async(self, action: SynchronizeProducts) -> None:
        try:
            products = await self._remote.load_all_products(
                action.site_id, page_number=action.page_number, page_size=action.page_size
            )
            if action.page_number == FIRST_PAGE_NUMBER:
                self.storage_manager.delete_where(Product, lambda p: p.site_id == action.site_id)
            self.storage_manager.upsert_all(products)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "products_sync_failed",
                site_id=action.site_id,
                page=action.page_number,
                error=describe_error(exc),
            )
            self._set_synchronizing(action.site_id, False)
            action.on_completion(Err(exc))
            return
        self._set_synchronizing(action.site_id, False)
        action.on_completion(Ok(len(products) >= action.page_size))

    async def _retrieve_product_async(self, action: RetrieveProduct) -> None:
        try:
            product = await self._remote.load_product(action.site_id, action.product_id)
            self.storage_manager.upsert(product)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "product_retrieve_failed", product_id=action.product_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        action.on_completion(Ok(product))

    async def _delete_product_async(self, action: DeleteProduct) -> None:
        try:
            product = await self._remote.delete_product(action.site_id, action.product_id)
            self.storage_manager.delete(product)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(
                "product_delete_failed", product_id=action.product_id, error=describe_error(exc)
            )
            action.on_completion(Err(exc))
            return
        action.on_completion(Ok(product))

    def _set_synchronizing(self, site_id: int, active: bool) -> None:
        current = self._state["synchronizing"]
        self.update_state(synchronizing=current | {site_id} if active else current - {site_id})


__all__ = ["ProductStore"]
