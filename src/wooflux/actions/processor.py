"""ActionsProcessor – anything that reacts to one or more action categories."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from wooflux.actions.action import Action

if TYPE_CHECKING:
    from wooflux.actions.dispatcher import Dispatcher


class ActionsProcessor(abc.ABC):
    """Reacts to the action categories it registers for."""

    @abc.abstractmethod
    def register_supported_actions(self, dispatcher: "Dispatcher") -> None:
        """Call ``dispatcher.register`` for every category this processor handles."""

    @abc.abstractmethod
    def on_action(self, action: Action) -> None:
        """Handle *action*; it always belongs to a registered category."""


__all__ = ["ActionsProcessor"]
