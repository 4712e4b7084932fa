"""Tests for the HTTP pipeline: bearer header, envelope unwrapping, 401 policy.

Uses ``httpx.MockTransport``, no sockets.
"""

import httpx
import pytest

from storefront.domain.exceptions import (
    MalformedResponseError,
    NetworkUnreachableError,
    RemoteRejectedError,
    SessionExpiredError,
)
from storefront.infrastructure.api.client import ApiClient
from tests.fakes import FakeTokenRepository


def _client(handler, token: str | None = None) -> tuple[ApiClient, FakeTokenRepository]:
    tokens = FakeTokenRepository(token)
    client = ApiClient("http://test/api", tokens, transport=httpx.MockTransport(handler))
    return client, tokens


def _envelope(data=None, success=True, message="OK"):
    return {"success": success, "message": message, "data": data}


class TestHeaders:

    def test_bearer_token_attached(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            seen["path"] = request.url.path
            return httpx.Response(200, json=_envelope())

        client, _ = _client(handler, token="tok-1")
        client.get("/menu/items")
        assert seen == {"auth": "Bearer tok-1", "path": "/api/menu/items"}

    def test_no_header_without_token(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=_envelope())

        client, _ = _client(handler)
        client.get("/menu/items")
        assert seen["auth"] is None

    def test_token_read_per_request(self):
        seen = []

        def handler(request):
            seen.append(request.headers.get("Authorization"))
            return httpx.Response(200, json=_envelope())

        client, tokens = _client(handler)
        client.get("/a")
        tokens.set("tok-2")
        client.get("/b")
        assert seen == [None, "Bearer tok-2"]


class TestEnvelope:

    def test_returns_data(self):
        client, _ = _client(lambda r: httpx.Response(200, json=_envelope({"id": 1})))
        assert client.get("/x") == {"id": 1}

    def test_success_false_is_rejection(self):
        client, _ = _client(
            lambda r: httpx.Response(200, json=_envelope(success=False, message="Out of stock"))
        )
        with pytest.raises(RemoteRejectedError, match="Out of stock") as info:
            client.post("/orders/add", json={})
        assert not info.value.is_server_fault

    def test_non_envelope_body(self):
        client, _ = _client(lambda r: httpx.Response(200, json=[1, 2, 3]))
        with pytest.raises(MalformedResponseError):
            client.get("/x")

    def test_html_body(self):
        client, _ = _client(lambda r: httpx.Response(200, text="<html>hi</html>"))
        with pytest.raises(MalformedResponseError):
            client.get("/x")


class TestErrors:

    def test_client_error_carries_server_message(self):
        client, _ = _client(
            lambda r: httpx.Response(400, json=_envelope(success=False, message="Bad phone"))
        )
        with pytest.raises(RemoteRejectedError, match="Bad phone") as info:
            client.get("/x")
        assert info.value.status_code == 400

    def test_server_error_without_body(self):
        client, _ = _client(lambda r: httpx.Response(503))
        with pytest.raises(RemoteRejectedError, match="status 503") as info:
            client.get("/x")
        assert info.value.is_server_fault

    def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client, _ = _client(handler)
        with pytest.raises(NetworkUnreachableError):
            client.get("/x")

    def test_timeout_is_network_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = _client(handler)
        with pytest.raises(NetworkUnreachableError):
            client.get("/x")


class TestUnauthorized:

    def test_401_clears_token(self):
        client, tokens = _client(
            lambda r: httpx.Response(401, json=_envelope(success=False, message="Token expired")),
            token="tok-1",
        )
        with pytest.raises(SessionExpiredError, match="Token expired"):
            client.get("/users/me")
        assert tokens.token is None

    def test_401_default_message(self):
        client, _ = _client(lambda r: httpx.Response(401), token="tok-1")
        with pytest.raises(SessionExpiredError, match="Session expired. Please login again."):
            client.get("/users/me")

    def test_403_keeps_token(self):
        client, tokens = _client(lambda r: httpx.Response(403), token="tok-1")
        with pytest.raises(RemoteRejectedError):
            client.get("/admin")
        assert tokens.token == "tok-1"
