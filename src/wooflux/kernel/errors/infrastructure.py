"""Infrastructure errors – network and storage failures."""

from __future__ import annotations

from typing import Any

from wooflux.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to reach the remote API or the storage backend."""

    default_code = "connection_error"
    retryable = True

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """A request exceeded its deadline."""

    default_code = "infrastructure_timeout"
    retryable = True


class SerializationError(InfrastructureError):
    """A payload could not be decoded into (or encoded from) an entity."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail.setdefault("payload_type", payload_type)


class ExternalServiceError(InfrastructureError):
    """The REST API answered with an error status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)
        # only 5xx (or no status at all) is worth repeating
        self.retryable = status_code is None or status_code >= 500


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
]
