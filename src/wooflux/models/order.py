"""Order entity."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

from wooflux.models.base import Entity, require, to_decimal, to_int


@dataclasses.dataclass(frozen=True)
class Order(Entity):
    key_fields: ClassVar[tuple[str, ...]] = ("site_id", "order_id")

    site_id: int
    order_id: int
    number: str
    status: str
    currency: str = "USD"
    total: Decimal = Decimal("0")
    customer_note: str = ""
    date_created: str = ""

    def copy(self, **changes: Any) -> "Order":
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_payload(cls, site_id: int, payload: Mapping[str, Any]) -> "Order":
        order_id = to_int(require(payload, "id", "Order"), "Order")
        return cls(
            site_id=site_id,
            order_id=order_id,
            number=str(payload.get("number") or order_id),
            status=str(require(payload, "status", "Order")),
            currency=str(payload.get("currency") or "USD"),
            total=to_decimal(payload.get("total"), "Order"),
            customer_note=str(payload.get("customer_note") or ""),
            date_created=str(payload.get("date_created_gmt") or ""),
        )


__all__ = ["Order"]
