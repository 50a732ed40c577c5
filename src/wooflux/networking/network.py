"""Networking – Network port and the httpx implementation."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

import httpx

from wooflux.kernel.errors import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureTimeoutError,
    SerializationError,
    UnauthorizedError,
)
from wooflux.networking.credentials import Credentials
from wooflux.observability.logging import get_logger

if TYPE_CHECKING:
    from wooflux.config import WoofluxSettings

logger = get_logger(__name__)


class Network(abc.ABC):
    """Port: issue a signed REST request and return the decoded JSON body."""

    @abc.abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any: ...

    async def aclose(self) -> None:
        """Release transport resources."""


class HttpxNetwork(Network):
    """Async httpx client with bearer authentication and error mapping."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        base_url: str,
        timeout: float = 30.0,
        user_agent: str = "wooflux",
        **client_kwargs: Any,
    ) -> None:
        self._credentials = credentials
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {credentials.auth_token}",
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            **client_kwargs,
        )

    @classmethod
    def from_settings(cls, credentials: Credentials, settings: "WoofluxSettings") -> "HttpxNetwork":
        return cls(
            credentials,
            base_url=settings.api_base_url,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
        )

    async def __aenter__(self) -> "HttpxNetwork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, params=params, json=json)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("request_timed_out", method=method, path=path)
            raise InfrastructureTimeoutError(f"HTTP request timed out: {method} {path}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("request_failed", method=method, path=path, status_code=status)
            if status in (401, 403):
                raise UnauthorizedError(
                    f"HTTP {status} from {method} {path}", detail={"status_code": status}, cause=exc
                ) from exc
            raise ExternalServiceError(
                service=path,
                message=f"HTTP {status} from {method} {path}",
                status_code=status,
                cause=exc,
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("request_transport_error", method=method, path=path, error=str(exc))
            raise ConnectionError(str(self._client.base_url), str(exc), cause=exc) from exc

        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Invalid JSON from {method} {path}", payload_type="json", cause=exc
            ) from exc
        return _unwrap(body)


def _unwrap(body: Any) -> Any:
    """Strip the ``{"data": ...}`` envelope used by tunnelled endpoints."""
    if isinstance(body, dict) and set(body) == {"data"}:
        return body["data"]
    return body


__all__ = ["HttpxNetwork", "Network"]
