"""StoresManager states – authenticated sessions own a Mall, others drop actions."""

from __future__ import annotations

import abc
import asyncio

from wooflux.actions import Action
from wooflux.context import StoresContext
from wooflux.mall import Mall
from wooflux.networking import Credentials
from wooflux.observability.logging import get_logger

logger = get_logger(__name__)


class StoresManagerState(abc.ABC):
    """Behaviour of the StoresManager while a session is (or is not) active."""

    def did_enter(self) -> None:
        """Executed when the state becomes active."""

    def will_leave(self) -> None:
        """Executed right before the state is replaced."""

    @abc.abstractmethod
    def on_action(self, action: Action) -> None: ...


class DeauthenticatedState(StoresManagerState):
    def did_enter(self) -> None:
        logger.info("deauthenticated_state_entered")

    def on_action(self, action: Action) -> None:
        logger.warning("action_ignored_while_deauthenticated", action=action.action_type)


class AuthenticatedState(StoresManagerState):
    def __init__(self, context: StoresContext, credentials: Credentials) -> None:
        self._context = context
        self.credentials = credentials
        self.mall = Mall(context, context.network_factory(credentials))

    def did_enter(self) -> None:
        logger.info("authenticated_state_entered", username=self.credentials.username)

    def will_leave(self) -> None:
        self._context.tasks.cancel_all()
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("network_left_open", reason="no running event loop")
            return
        self._context.tasks.spawn(self.mall.network.aclose(), name="network.aclose")

    def on_action(self, action: Action) -> None:
        self.mall.dispatch(action)


__all__ = ["AuthenticatedState", "DeauthenticatedState", "StoresManagerState"]
