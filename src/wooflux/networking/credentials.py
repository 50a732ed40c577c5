"""Credentials used to sign REST requests."""

from __future__ import annotations

import dataclasses
import uuid


@dataclasses.dataclass(frozen=True)
class Credentials:
    """Authenticated user's token and, optionally, the site it was issued for."""

    username: str
    auth_token: str = dataclasses.field(repr=False)
    site_address: str | None = None

    @classmethod
    def with_placeholder_username(cls, auth_token: str, site_address: str | None = None) -> "Credentials":
        """Credentials created before the account is known (username is a UUID)."""
        return cls(username=str(uuid.uuid4()), auth_token=auth_token, site_address=site_address)

    def has_placeholder_username(self) -> bool:
        try:
            uuid.UUID(self.username)
        except ValueError:
            return False
        return True

    def copy(self, **changes: str | None) -> "Credentials":
        return dataclasses.replace(self, **changes)


__all__ = ["Credentials"]
