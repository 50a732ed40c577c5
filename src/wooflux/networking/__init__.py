"""Networking – signed REST access and typed remotes."""
from wooflux.networking.credentials import Credentials
from wooflux.networking.network import HttpxNetwork, Network
from wooflux.networking.remotes import (
    DEFAULT_PAGE_SIZE,
    FIRST_PAGE_NUMBER,
    AccountRemote,
    OrdersRemote,
    ProductsRemote,
    Remote,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FIRST_PAGE_NUMBER",
    "AccountRemote",
    "Credentials",
    "HttpxNetwork",
    "Network",
    "OrdersRemote",
    "ProductsRemote",
    "Remote",
]
