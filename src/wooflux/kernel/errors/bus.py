"""Action bus errors – wiring mistakes between dispatcher and processors.

These signal construction-time bugs and are not meant to be recovered from.
"""

from __future__ import annotations

from typing import Any

from wooflux.kernel.errors.base import BaseError


class ActionBusError(BaseError):
    """Programming error in the dispatcher / processor wiring."""

    default_code = "action_bus_error"


class InvalidActionCategoryError(ActionBusError):
    """A value that is not an action category was used as a routing key."""

    default_code = "invalid_action_category"

    def __init__(self, candidate: Any) -> None:
        name = getattr(candidate, "__name__", type(candidate).__name__)
        super().__init__(f"{name!r} is not an action category")
        self.candidate = candidate


class UnsupportedActionError(ActionBusError):
    """A processor received an action it never declared support for."""

    default_code = "unsupported_action"

    def __init__(self, processor: Any, action: Any) -> None:
        super().__init__(
            f"{type(processor).__name__} received an unsupported action "
            f"{type(action).__name__}"
        )
        self.processor_type = type(processor).__name__
        self.action_type = type(action).__name__


__all__ = ["ActionBusError", "InvalidActionCategoryError", "UnsupportedActionError"]
