"""StoresManager – session-aware entry point for dispatching actions."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from wooflux.actions import Action, LoadAccount, LoadSite, SynchronizeAccount, SynchronizeSites
from wooflux.context import StoresContext
from wooflux.kernel.errors import UnauthorizedError
from wooflux.kernel.types import Result
from wooflux.mall import Mall
from wooflux.manager.session import SessionManager
from wooflux.manager.states import AuthenticatedState, DeauthenticatedState, StoresManagerState
from wooflux.models import Account, Site
from wooflux.networking import Credentials
from wooflux.observability.logging import get_logger

logger = get_logger(__name__)

LoggedInListener = Callable[[bool], None]


class _CompletionGroup:
    """Call *on_done* with the collected errors once *count* parts have finished."""

    def __init__(self, count: int, on_done: Callable[[list[Exception]], None] | None) -> None:
        self._remaining = count
        self._errors: list[Exception] = []
        self._on_done = on_done

    def leave(self, error: Exception | None = None) -> None:
        if error is not None:
            self._errors.append(error)
        self._remaining -= 1
        if self._remaining == 0 and self._on_done is not None:
            self._on_done(list(self._errors))


class StoresManager:
    """Forward actions to the active session state.

    While authenticated, actions reach the stores of the session's
    :class:`~wooflux.mall.Mall`; while deauthenticated they are dropped.
    """

    def __init__(self, context: StoresContext, session: SessionManager | None = None) -> None:
        self._context = context
        self.session = session or SessionManager()
        self._listeners: list[LoggedInListener] = []
        credentials = self.session.default_credentials
        self._state: StoresManagerState = (
            AuthenticatedState(context, credentials) if credentials else DeauthenticatedState()
        )
        self._state.did_enter()
        self._is_logged_in = self.is_authenticated

        self._restore_session_account_if_possible()
        self._restore_session_site_if_possible()

    # Session ----------------------------------------------------------
    @property
    def is_authenticated(self) -> bool:
        return isinstance(self._state, AuthenticatedState)

    @property
    def needs_default_store(self) -> bool:
        return self.session.default_store_id is None

    @property
    def mall(self) -> Mall | None:
        return self._state.mall if isinstance(self._state, AuthenticatedState) else None

    def observe_logged_in(self, listener: LoggedInListener) -> Callable[[], None]:
        """Call *listener* whenever the logged-in flag flips; returns a disposer."""
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def authenticate(self, credentials: Credentials) -> "StoresManager":
        self._set_state(AuthenticatedState(self._context, credentials))
        self.session.default_credentials = credentials
        return self

    def deauthenticate(self) -> "StoresManager":
        self._set_state(DeauthenticatedState())
        self.session.reset()
        self._context.storage_manager.reset()
        return self

    def update_default_store(self, store_id: int) -> None:
        self.session.default_store_id = store_id
        self._restore_session_site_if_possible()

    # Dispatch ---------------------------------------------------------
    def dispatch(self, action: Action | Iterable[Action]) -> None:
        if isinstance(action, Action):
            self._state.on_action(action)
            return
        for item in action:
            self._state.on_action(item)

    def synchronize_entities(
        self, on_completion: Callable[[list[Exception]], None] | None = None
    ) -> "StoresManager":
        """Synchronize the account and its sites; *on_completion* gets the errors."""
        if not self.is_authenticated:
            if on_completion is not None:
                on_completion([UnauthorizedError("Cannot synchronize while deauthenticated")])
            return self

        group = _CompletionGroup(2, on_completion)

        def account_synchronized(result: Result[Account, Exception]) -> None:
            if result.is_ok() and self.is_authenticated:
                self._adopt_account(result.unwrap())
            group.leave(None if result.is_ok() else result.error)

        def sites_synchronized(result: Result[None, Exception]) -> None:
            group.leave(None if result.is_ok() else result.error)

        self.dispatch(
            [
                SynchronizeAccount(on_completion=account_synchronized),
                SynchronizeSites(on_completion=sites_synchronized),
            ]
        )
        return self

    # Internals --------------------------------------------------------
    def _set_state(self, state: StoresManagerState) -> None:
        self._state.will_leave()
        self._state = state
        state.did_enter()
        logged_in = self.is_authenticated
        if logged_in != self._is_logged_in:
            self._is_logged_in = logged_in
            for listener in list(self._listeners):
                listener(logged_in)

    def _adopt_account(self, account: Account) -> None:
        self.session.default_account = account
        credentials = self.session.default_credentials
        if credentials is not None and credentials.has_placeholder_username():
            logger.info("placeholder_username_replaced", username=account.username)
            self.session.default_credentials = credentials.copy(username=account.username)

    def _restore_session_account_if_possible(self) -> None:
        account_id = self.session.default_account_id
        if account_id is None:
            return

        def loaded(account: Account | None) -> None:
            if account is not None:
                self._adopt_account(account)

        self.dispatch(LoadAccount(user_id=account_id, on_completion=loaded))

    def _restore_session_site_if_possible(self) -> None:
        store_id = self.session.default_store_id
        if store_id is None:
            return

        def loaded(site: Site | None) -> None:
            if site is not None:
                self.session.default_site = site

        self.dispatch(LoadSite(site_id=store_id, on_completion=loaded))


__all__ = ["LoggedInListener", "StoresManager"]
