"""SessionManager – session-scoped properties kept across app launches."""

from __future__ import annotations

from wooflux.models import Account, Site
from wooflux.networking import Credentials


class SessionManager:
    """In-memory session: credentials, account and the selected store."""

    def __init__(
        self,
        default_credentials: Credentials | None = None,
        default_account: Account | None = None,
        default_store_id: int | None = None,
    ) -> None:
        self.default_credentials = default_credentials
        self.default_account = default_account
        self.default_store_id = default_store_id
        self.default_site: Site | None = None

    @property
    def default_account_id(self) -> int | None:
        return self.default_account.user_id if self.default_account else None

    def reset(self) -> None:
        self.default_credentials = None
        self.default_account = None
        self.default_store_id = None
        self.default_site = None


__all__ = ["SessionManager"]
