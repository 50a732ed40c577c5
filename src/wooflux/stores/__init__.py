"""Stores – processors owning the account, product and order state."""
from wooflux.stores.account import AccountStore
from wooflux.stores.base import StateListener, Store, handles
from wooflux.stores.order import OrderStore
from wooflux.stores.product import ProductStore
from wooflux.stores.tasks import TaskRunner

__all__ = ["AccountStore", "OrderStore", "ProductStore", "StateListener", "Store", "TaskRunner", "handles"]
