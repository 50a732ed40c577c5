"""Product entity."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, ClassVar

from wooflux.kernel.errors import SerializationError
from wooflux.models.base import Entity, require, to_decimal, to_int


@dataclasses.dataclass(frozen=True)
class Product(Entity):
    key_fields: ClassVar[tuple[str, ...]] = ("site_id", "product_id")

    site_id: int
    product_id: int
    name: str
    sku: str = ""
    product_type: str = "simple"
    status: str = "publish"
    price: Decimal = Decimal("0")
    stock_quantity: int | None = None
    variations: tuple[int, ...] = ()

    @classmethod
    def from_payload(cls, site_id: int, payload: Mapping[str, Any]) -> "Product":
        product_id = to_int(require(payload, "id", "Product"), "Product")
        name = str(require(payload, "name", "Product"))
        stock = payload.get("stock_quantity")
        return cls(
            site_id=site_id,
            product_id=product_id,
            name=name,
            sku=str(payload.get("sku") or ""),
            product_type=str(payload.get("type") or "simple"),
            status=str(payload.get("status") or "publish"),
            price=to_decimal(payload.get("price"), "Product"),
            stock_quantity=to_int(stock, "Product") if stock is not None else None,
            variations=_variations(payload.get("variations")),
        )


def _variations(value: Any) -> tuple[int, ...]:
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise SerializationError(
            f"Expected a list of variation ids, got {type(value).__name__}", payload_type="Product"
        )
    return tuple(to_int(v, "Product") for v in value)


__all__ = ["Product"]
