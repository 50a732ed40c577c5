"""Store – a processor that owns a slice of state.

Handlers are plain methods tagged with :func:`handles`; the class collects
them into a variant → method table when it is defined::

    class ProductStore(Store):
        @handles(RetrieveProduct)
        def _retrieve_product(self, action: RetrieveProduct) -> None:
            ...

``on_action`` routes through the table, and the store registers for every
category its handlers cover.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable, Coroutine, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from wooflux.actions import Action, ActionsProcessor, Dispatcher, category_of
from wooflux.kernel.errors import UnsupportedActionError
from wooflux.networking import Network
from wooflux.observability.logging import get_logger
from wooflux.storage import StorageManager
from wooflux.stores.tasks import TaskRunner

_HANDLES_ATTR = "__handles_actions__"

StateListener = Callable[[Mapping[str, Any]], None]


def handles(*variants: type[Action]) -> Callable[[Callable[..., None]], Callable[..., None]]:
    """Mark a store method as the handler for *variants*."""
    for variant in variants:
        category_of(variant)

    def decorator(fn: Callable[..., None]) -> Callable[..., None]:
        setattr(fn, _HANDLES_ATTR, getattr(fn, _HANDLES_ATTR, ()) + variants)
        return fn

    return decorator


class Store(ActionsProcessor):
    """Base class for stores.

    Args:
        dispatcher: registry to subscribe to; kept as a weak reference and
            used afterwards only to dispatch follow-up actions.
        storage_manager: persistence collaborator.
        network: network collaborator used by the store's remotes.
        tasks: runner for asynchronous work (one per store when omitted).
    """

    initial_state: ClassVar[Mapping[str, Any]] = MappingProxyType({})
    _handlers: ClassVar[dict[type[Action], str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        handlers: dict[type[Action], str] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                for variant in getattr(attr, _HANDLES_ATTR, ()):
                    handlers[variant] = name
        cls._handlers = handlers

    def __init__(
        self,
        dispatcher: Dispatcher,
        storage_manager: StorageManager,
        network: Network,
        *,
        tasks: TaskRunner | None = None,
    ) -> None:
        self._dispatcher = weakref.ref(dispatcher)
        self.storage_manager = storage_manager
        self.network = network
        self.tasks = tasks or TaskRunner()
        self._state: dict[str, Any] = dict(self.initial_state)
        self._listeners: list[StateListener] = []
        self._log = get_logger(__name__, store=type(self).__name__)
        self.register_supported_actions(dispatcher)

    # Action handling ---------------------------------------------------
    @classmethod
    def supported_categories(cls) -> tuple[type[Action], ...]:
        return tuple(dict.fromkeys(category_of(variant) for variant in cls._handlers))

    def register_supported_actions(self, dispatcher: Dispatcher) -> None:
        for category in self.supported_categories():
            dispatcher.register(self, category)

    def on_action(self, action: Action) -> None:
        for klass in type(action).__mro__:
            name = self._handlers.get(klass)
            if name is not None:
                getattr(self, name)(action)
                return
        self._log.error("unsupported_action", action=action.action_type)
        raise UnsupportedActionError(self, action)

    def dispatch(self, action: Action) -> None:
        """Send a follow-up action through the dispatcher this store registered with."""
        dispatcher = self._dispatcher()
        if dispatcher is None:
            self._log.warning("dispatcher_released", action=action.action_type)
            return
        dispatcher.dispatch(action)

    def run(self, coro: Coroutine[Any, Any, Any], action: Action) -> None:
        self.tasks.spawn(coro, name=f"{type(self).__name__}.{action.action_type}")

    # Observable state --------------------------------------------------
    @property
    def state(self) -> Mapping[str, Any]:
        return MappingProxyType(self._state)

    def observe(self, listener: StateListener) -> Callable[[], None]:
        """Call *listener* with the new state after every change; returns a disposer."""
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def update_state(self, **changes: Any) -> None:
        if all(k in self._state and self._state[k] == v for k, v in changes.items()):
            return
        self._state.update(changes)
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = ["StateListener", "Store", "handles"]
