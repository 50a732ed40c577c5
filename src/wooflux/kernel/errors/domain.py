"""Domain errors – missing or conflicting entities."""

from __future__ import annotations

from typing import Any

from wooflux.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a business rule about stored entities is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested entity does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = ["DomainError", "NotFoundError"]
