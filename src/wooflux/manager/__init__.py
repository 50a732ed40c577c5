"""Manager – session state machine above the Mall."""
from wooflux.manager.session import SessionManager
from wooflux.manager.states import AuthenticatedState, DeauthenticatedState, StoresManagerState
from wooflux.manager.stores_manager import LoggedInListener, StoresManager

__all__ = [
    "AuthenticatedState",
    "DeauthenticatedState",
    "LoggedInListener",
    "SessionManager",
    "StoresManager",
    "StoresManagerState",
]
