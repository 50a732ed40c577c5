"""
wooflux – Action bus and stores for a commerce management client.

Import path convention::

    from wooflux.actions import Dispatcher, SynchronizeProducts
    from wooflux.stores import ProductStore
    from wooflux.manager import StoresManager
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
