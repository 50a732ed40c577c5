"""Unit tests – HttpxNetwork request signing and error mapping."""
from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest
import respx

from wooflux.config import WoofluxSettings
from wooflux.kernel.errors import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureTimeoutError,
    SerializationError,
    UnauthorizedError,
)
from wooflux.networking import Credentials, HttpxNetwork

BASE_URL = "https://api.test/rest/v1.1/"
CREDENTIALS = Credentials(username="keeper", auth_token="s3cret")


def _request(method: str, path: str, **kwargs: Any) -> Any:
    async def run() -> Any:
        async with HttpxNetwork(CREDENTIALS, base_url=BASE_URL, user_agent="wooflux-test") as network:
            return await network.request(method, path, **kwargs)

    return asyncio.run(run())


class TestRequestSigning:
    @respx.mock
    def test_bearer_token_and_user_agent(self) -> None:
        route = respx.get(f"{BASE_URL}me").mock(return_value=httpx.Response(200, json={"ID": 1}))
        assert _request("GET", "me") == {"ID": 1}
        sent = route.calls.last.request
        assert sent.headers["authorization"] == "Bearer s3cret"
        assert sent.headers["user-agent"] == "wooflux-test"
        assert sent.headers["accept"] == "application/json"

    @respx.mock
    def test_query_params_and_json_body(self) -> None:
        route = respx.route(method="PUT", host="api.test", path="/rest/v1.1/sites/1/wc/v3/orders/2").mock(
            return_value=httpx.Response(200, json={"id": 2})
        )
        _request("PUT", "sites/1/wc/v3/orders/2", params={"force": "true"}, json={"status": "completed"})
        sent = route.calls.last.request
        assert sent.url.params["force"] == "true"
        assert b'"completed"' in sent.content

    def test_from_settings_uses_configured_base_url(self) -> None:
        settings = WoofluxSettings(api_base_url="https://example.test/api")

        async def run() -> str:
            network = HttpxNetwork.from_settings(CREDENTIALS, settings)
            try:
                return str(network._client.base_url)
            finally:
                await network.aclose()

        assert asyncio.run(run()) == "https://example.test/api/"


class TestResponseDecoding:
    @respx.mock
    def test_data_envelope_is_unwrapped(self) -> None:
        respx.get(f"{BASE_URL}me/sites").mock(
            return_value=httpx.Response(200, json={"data": {"sites": []}})
        )
        assert _request("GET", "me/sites") == {"sites": []}

    @respx.mock
    def test_payload_with_other_keys_is_kept(self) -> None:
        body = {"data": [1], "next": None}
        respx.get(f"{BASE_URL}me").mock(return_value=httpx.Response(200, json=body))
        assert _request("GET", "me") == body

    @respx.mock
    def test_empty_body_is_none(self) -> None:
        respx.delete(f"{BASE_URL}thing").mock(return_value=httpx.Response(204))
        assert _request("DELETE", "thing") is None

    @respx.mock
    def test_invalid_json_raises_serialization_error(self) -> None:
        respx.get(f"{BASE_URL}me").mock(return_value=httpx.Response(200, text="<html>"))
        with pytest.raises(SerializationError):
            _request("GET", "me")


class TestErrorMapping:
    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_failures(self, status: int) -> None:
        with respx.mock:
            respx.get(f"{BASE_URL}me").mock(return_value=httpx.Response(status))
            with pytest.raises(UnauthorizedError) as exc_info:
                _request("GET", "me")
        assert exc_info.value.detail == {"status_code": status}

    @respx.mock
    def test_server_error(self) -> None:
        respx.get(f"{BASE_URL}me").mock(return_value=httpx.Response(500))
        with pytest.raises(ExternalServiceError) as exc_info:
            _request("GET", "me")
        assert exc_info.value.status_code == 500

    @respx.mock
    def test_timeout(self) -> None:
        respx.get(f"{BASE_URL}me").mock(side_effect=httpx.ReadTimeout("slow"))
        with pytest.raises(InfrastructureTimeoutError):
            _request("GET", "me")

    @respx.mock
    def test_transport_error(self) -> None:
        respx.get(f"{BASE_URL}me").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(ConnectionError):
            _request("GET", "me")
