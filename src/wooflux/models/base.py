"""Entity helpers – payload decoding shared by every model."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Self

from wooflux.kernel.errors import SerializationError


@dataclasses.dataclass(frozen=True)
class Entity:
    """Read-only entity decoded from the REST API.

    Subclasses list the fields that identify a row in ``key_fields``.
    """

    key_fields: ClassVar[tuple[str, ...]] = ()

    @property
    def storage_key(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.key_fields)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            data[f.name] = str(value) if isinstance(value, Decimal) else value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Rebuild an entity from :meth:`to_dict` output."""
        kwargs: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.type in ("Decimal", Decimal) and value is not None:
                value = Decimal(value)
            elif isinstance(value, list):
                value = tuple(value)
            kwargs[f.name] = value
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise SerializationError(str(exc), payload_type=cls.__name__, cause=exc) from exc


def require(payload: Mapping[str, Any], key: str, entity: str) -> Any:
    if not isinstance(payload, Mapping):
        raise SerializationError(f"Expected an object for {entity}", payload_type=entity)
    try:
        return payload[key]
    except KeyError as exc:
        raise SerializationError(
            f"Missing '{key}' in {entity} payload", payload_type=entity, cause=exc
        ) from exc


def to_decimal(value: Any, entity: str) -> Decimal:
    if value in (None, ""):
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise SerializationError(
            f"Invalid amount {value!r} in {entity} payload", payload_type=entity, cause=exc
        ) from exc


def to_int(value: Any, entity: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Invalid integer {value!r} in {entity} payload", payload_type=entity, cause=exc
        ) from exc


def mapping_field(payload: Mapping[str, Any], key: str, entity: str) -> Mapping[str, Any]:
    """Return the nested object under *key*, or an empty mapping when it is absent."""
    value = payload.get(key) or {}
    if not isinstance(value, Mapping):
        raise SerializationError(f"Expected an object for '{key}' in {entity}", payload_type=entity)
    return value


__all__ = ["Entity", "mapping_field", "require", "to_decimal", "to_int"]
