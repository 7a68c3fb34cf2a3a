"""Shared HTTP plumbing for the external service clients.

HTTP Client Sharing:
    Each service client owns one httpx.Client for the lifetime of a
    command run. Tests inject a client built on httpx.MockTransport;
    otherwise a client is created with the configured timeout and closed
    by close() or by leaving the ``with`` block.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Literal, TypeVar

import httpx

from diffy_setup import USER_AGENT
from diffy_setup.config.settings import DEFAULT_HTTP_TIMEOUT_SECONDS
from diffy_setup.utils.logging import log_request

_ClientT = TypeVar("_ClientT", bound="ServiceClient")


class ServiceClient:
    """Base class for synchronous JSON API clients.

    Attributes:
        base_url: Root URL every request path is joined to
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=httpx.Timeout(timeout_seconds))

    def __enter__(self: _ClientT) -> _ClientT:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }

    def _request(
        self,
        method: Literal["GET", "POST"],
        path: str,
        *,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        auth: httpx.Auth | tuple[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and return the response without raising on status.

        Raises:
            httpx.RequestError: Connection failures, timeouts and undecodable bodies
        """
        url = f"{self.base_url}{path}"
        merged_headers = self._default_headers()
        if headers:
            merged_headers.update(headers)

        # Build kwargs dynamically - only include non-None values
        kwargs: dict[str, Any] = {"headers": merged_headers}
        if params is not None:
            kwargs["params"] = params
        if json_data is not None:
            kwargs["json"] = json_data
        if auth is not None:
            kwargs["auth"] = auth

        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.RequestError:
            log_request(method, url)
            raise
        log_request(method, url, response.status_code)
        return response


def json_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, returning an empty dict for anything else."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def is_client_error(response: httpx.Response) -> bool:
    return 400 <= response.status_code < 500


__all__ = ["ServiceClient", "json_body", "is_client_error"]
