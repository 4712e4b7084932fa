"""The single configured HTTP pipeline to the restaurant backend.

Every request picks up the current bearer token from the token store.
Every response is expected to be a ``{success, message, data}``
envelope; ``request()`` returns ``data`` or raises a GatewayError.

A 401 from any endpoint clears the stored token as a side effect of
the response hook.  That is global policy: callers cannot opt out, and
the session manager finds out the next time it looks at the store.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.domain.exceptions import (
    MalformedResponseError,
    NetworkUnreachableError,
    PersistenceError,
    RemoteRejectedError,
    SessionExpiredError,
)
from storefront.domain.repository.token_repository import TokenRepository

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ApiClient:

    def __init__(
        self,
        base_url: str,
        token_repo: TokenRepository,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token_repo = token_repo
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            event_hooks={
                "request": [self._attach_token],
                "response": [self._handle_unauthorized],
            },
            transport=transport,
        )

    # --- Public interface -----------------------------------------------------

    def get(self, path: str, params: dict | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: dict | None = None,
    ) -> Any:
        """Send one request and unwrap the envelope.

        Raises:
            NetworkUnreachableError: the server was never reached.
            SessionExpiredError: HTTP 401 (the token is already gone).
            RemoteRejectedError: any other non-2xx, or ``success=false``.
            MalformedResponseError: the body is not an envelope.
        """
        try:
            response = self._http.request(method, path, json=json, params=params)
        except httpx.TransportError as exc:
            logger.warning("[API] %s %s unreachable: %s", method, path, exc)
            raise NetworkUnreachableError(str(exc) or type(exc).__name__) from exc

        envelope = _decode(response)

        if response.status_code == 401:
            raise SessionExpiredError(_message_of(envelope) or "Session expired. Please login again.")
        if not response.is_success:
            message = _message_of(envelope) or f"Request failed with status {response.status_code}"
            raise RemoteRejectedError(message, status_code=response.status_code)

        if not isinstance(envelope, dict) or "success" not in envelope:
            raise MalformedResponseError(f"{method} {path}: response is not an envelope")
        if not envelope["success"]:
            raise RemoteRejectedError(
                _message_of(envelope) or "Request was rejected",
                status_code=response.status_code,
            )
        return envelope.get("data")

    def close(self) -> None:
        self._http.close()

    # --- Event hooks ----------------------------------------------------------

    def _attach_token(self, request: httpx.Request) -> None:
        try:
            token = self._token_repo.get()
        except PersistenceError as exc:
            logger.warning("Error reading token: %s", exc)
            token = None
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
            logger.debug("[API] %s %s (token %s...)", request.method, request.url.path, token[:10])
        else:
            logger.debug("[API] %s %s (no token)", request.method, request.url.path)

    def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return
        logger.info("[API] 401 from %s; clearing stored token", response.request.url.path)
        try:
            self._token_repo.remove()
        except PersistenceError as exc:
            logger.warning("Failed to clear token after 401: %s", exc)


def _decode(response: httpx.Response) -> Any:
    # Error bodies are often empty or HTML; those simply carry no message.
    try:
        response.read()
        return response.json()
    except ValueError:
        return None


def _message_of(envelope: Any) -> str | None:
    if isinstance(envelope, dict):
        message = envelope.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None
