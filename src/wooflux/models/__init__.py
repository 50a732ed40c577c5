"""Read-only entities decoded from the REST API and kept in storage."""
from wooflux.models.account import Account, Site
from wooflux.models.base import Entity
from wooflux.models.order import Order
from wooflux.models.product import Product

__all__ = ["Account", "Entity", "Order", "Product", "Site"]
