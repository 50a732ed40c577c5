"""Account and Site entities."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar

from wooflux.models.base import Entity, mapping_field, require, to_int


@dataclasses.dataclass(frozen=True)
class Account(Entity):
    key_fields: ClassVar[tuple[str, ...]] = ("user_id",)

    user_id: int
    username: str
    display_name: str = ""
    email: str = ""
    gravatar_url: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Account":
        return cls(
            user_id=to_int(require(payload, "ID", "Account"), "Account"),
            username=str(require(payload, "username", "Account")),
            display_name=str(payload.get("display_name") or ""),
            email=str(payload.get("email") or ""),
            gravatar_url=payload.get("avatar_URL"),
        )


@dataclasses.dataclass(frozen=True)
class Site(Entity):
    key_fields: ClassVar[tuple[str, ...]] = ("site_id",)

    site_id: int
    name: str
    url: str
    is_woocommerce_active: bool = False
    is_jetpack_connected: bool = False
    timezone: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Site":
        site_id = to_int(require(payload, "ID", "Site"), "Site")
        url = str(require(payload, "URL", "Site"))
        options = mapping_field(payload, "options", "Site")
        return cls(
            site_id=site_id,
            name=str(payload.get("name") or ""),
            url=url,
            is_woocommerce_active=bool(options.get("woocommerce_is_active", False)),
            is_jetpack_connected=bool(payload.get("jetpack", False)),
            timezone=str(options.get("timezone") or ""),
        )


__all__ = ["Account", "Site"]
