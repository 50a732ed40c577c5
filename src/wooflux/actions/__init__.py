"""Action bus – actions, processors and the dispatcher."""
from wooflux.actions.account import (
    AccountAction,
    LoadAccount,
    LoadAndSynchronizeSiteIfNeeded,
    LoadSite,
    SynchronizeAccount,
    SynchronizeSites,
)
from wooflux.actions.action import Action, category_of, is_category
from wooflux.actions.dispatcher import Dispatcher
from wooflux.actions.order import (
    OrderAction,
    ResetStoredOrders,
    RetrieveOrder,
    SynchronizeOrders,
    UpdateOrderStatus,
)
from wooflux.actions.processor import ActionsProcessor
from wooflux.actions.product import (
    DeleteProduct,
    ProductAction,
    ResetStoredProducts,
    RetrieveProduct,
    SynchronizeProducts,
    UpsertProduct,
)

__all__ = [
    "AccountAction",
    "Action",
    "ActionsProcessor",
    "DeleteProduct",
    "Dispatcher",
    "LoadAccount",
    "LoadAndSynchronizeSiteIfNeeded",
    "LoadSite",
    "OrderAction",
    "ProductAction",
    "ResetStoredOrders",
    "ResetStoredProducts",
    "RetrieveOrder",
    "RetrieveProduct",
    "SynchronizeAccount",
    "SynchronizeOrders",
    "SynchronizeProducts",
    "SynchronizeSites",
    "UpdateOrderStatus",
    "UpsertProduct",
    "category_of",
    "is_category",
]
