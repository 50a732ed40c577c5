"""Dispatcher – synchronous pub/sub router between actions and processors."""

from __future__ import annotations

import weakref
from collections.abc import Iterable

from wooflux.actions.action import Action, category_of, is_category
from wooflux.actions.processor import ActionsProcessor
from wooflux.kernel.errors import InvalidActionCategoryError
from wooflux.observability.logging import get_logger

logger = get_logger(__name__)


class Dispatcher:
    """Route each dispatched action to the processors registered for its category.

    * Delivery is synchronous, on the calling thread, in registration order.
    * A category without subscribers is a no-op.
    * Processors are referenced weakly; the owner (usually the
      :class:`~wooflux.mall.Mall`) keeps them alive.
    * Registering the same processor twice for a category is a no-op.
    * An exception raised by a processor propagates to the caller and the
      remaining processors are not reached.

    Not thread-safe: confine all calls to a single thread (or serialise them).
    """

    def __init__(self) -> None:
        self._processors: dict[type[Action], list[weakref.ref[ActionsProcessor]]] = {}

    def register(self, processor: ActionsProcessor, category: type[Action]) -> None:
        if not is_category(category):
            raise InvalidActionCategoryError(category)
        refs = self._live_refs(category)
        if any(ref() is processor for ref in refs):
            logger.debug(
                "processor_already_registered",
                processor=type(processor).__name__,
                category=category.__name__,
            )
            return
        refs.append(weakref.ref(processor))
        self._processors[category] = refs

    def unregister(self, processor: ActionsProcessor, category: type[Action] | None = None) -> None:
        """Remove *processor* from *category*, or from every category when omitted."""
        categories = [category] if category is not None else list(self._processors)
        for cat in categories:
            refs = [ref for ref in self._live_refs(cat) if ref() is not processor]
            if refs:
                self._processors[cat] = refs
            else:
                self._processors.pop(cat, None)

    def processors_for(self, category: type[Action]) -> list[ActionsProcessor]:
        """Live subscribers of *category*; entries of released processors are pruned."""
        refs = self._processors.get(category, [])
        processors = [p for p in (ref() for ref in refs) if p is not None]
        if len(processors) != len(refs):
            self._prune(category)
        return processors

    def is_registered(self, processor: ActionsProcessor, category: type[Action]) -> bool:
        return any(p is processor for p in self.processors_for(category))

    def dispatch(self, action: Action) -> None:
        category = category_of(action)
        processors = self.processors_for(category)
        if not processors:
            logger.debug("action_unhandled", action=action.action_type, category=category.__name__)
            return

        logger.debug(
            "action_dispatched",
            action=action.action_type,
            category=category.__name__,
            subscribers=len(processors),
        )
        for processor in processors:
            processor.on_action(action)

    def dispatch_all(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self.dispatch(action)

    def _prune(self, category: type[Action]) -> None:
        refs = self._live_refs(category)
        if refs:
            self._processors[category] = refs
        else:
            self._processors.pop(category, None)

    def _live_refs(self, category: type[Action]) -> list[weakref.ref[ActionsProcessor]]:
        return [ref for ref in self._processors.get(category, ()) if ref() is not None]


__all__ = ["Dispatcher"]
