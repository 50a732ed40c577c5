"""Actions and action categories.

An *action category* is a class deriving directly from :class:`Action`;
its *variants* are frozen dataclasses deriving from the category::

    class ProductAction(Action):
        pass

    @dataclasses.dataclass(frozen=True)
    class RetrieveProduct(ProductAction):
        site_id: int
        product_id: int
        on_completion: Callable[[Result[Product, Exception]], None]

The dispatcher routes on the category, so a processor registered for
``ProductAction`` receives every product variant.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from wooflux.kernel.errors import InvalidActionCategoryError


@dataclasses.dataclass(frozen=True)
class Action:
    """Base class for immutable actions routed through the dispatcher."""

    @property
    def action_type(self) -> str:
        return type(self).__name__


def is_category(candidate: Any) -> bool:
    """Return ``True`` when *candidate* is a class deriving directly from ``Action``."""
    return isinstance(candidate, type) and Action in candidate.__bases__


def category_of(action: Action | type[Action]) -> type[Action]:
    """Return the routing key for *action* (an instance or a variant class)."""
    klass = action if isinstance(action, type) else type(action)
    if isinstance(klass, type) and issubclass(klass, Action):
        for base in klass.__mro__:
            if is_category(base):
                return base
    raise InvalidActionCategoryError(klass)


__all__ = ["Action", "category_of", "is_category"]
