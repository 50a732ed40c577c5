"""Mall – owns the dispatcher and one instance of every store."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypeVar

from wooflux.actions import Action, Dispatcher
from wooflux.networking import Network
from wooflux.stores import AccountStore, OrderStore, ProductStore, Store

if TYPE_CHECKING:
    from wooflux.context import StoresContext

TStore = TypeVar("TStore", bound=Store)

DEFAULT_STORE_TYPES: tuple[type[Store], ...] = (AccountStore, ProductStore, OrderStore)


class Mall:
    """Fixed set of stores behind a single ``dispatch`` entry point.

    The Mall holds the only strong references to its stores; the
    dispatcher only references them weakly.
    """

    def __init__(
        self,
        context: "StoresContext",
        network: Network,
        *,
        store_types: Sequence[type[Store]] = DEFAULT_STORE_TYPES,
    ) -> None:
        self.dispatcher = Dispatcher()
        self.network = network
        self._stores: dict[type[Store], Store] = {
            store_type: store_type(
                self.dispatcher,
                context.storage_manager,
                network,
                tasks=context.tasks,
            )
            for store_type in store_types
        }

    @property
    def stores(self) -> tuple[Store, ...]:
        return tuple(self._stores.values())

    def store(self, store_type: type[TStore]) -> TStore:
        return self._stores[store_type]  # type: ignore[return-value]

    def dispatch(self, action: Action) -> None:
        self.dispatcher.dispatch(action)

    def dispatch_all(self, actions: Iterable[Action]) -> None:
        self.dispatcher.dispatch_all(actions)


__all__ = ["DEFAULT_STORE_TYPES", "Mall"]
