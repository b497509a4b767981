"""
Async HTTP transport for the deposit API.

Sends requests and hands back raw response text; decoding is a separate
step. There is no retry: a failed request surfaces to the caller.
"""

import time
from collections.abc import Mapping
from logging import Logger
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from bridge_harness.client.decode import decode
from bridge_harness.config import Settings
from bridge_harness.errors import HttpStatusError, TransportError
from bridge_harness.logging import redact_headers, redact_sensitive

T = TypeVar("T")


def _json_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    return body


class ApiClient:
    """
    Async client issuing raw HTTP requests.

    Handles:
    - Lazy creation of a shared httpx.AsyncClient
    - API key header injection
    - Redacted request/response debug logging
    """

    def __init__(self, settings: Settings, logger: Logger) -> None:
        """
        Initialize API client.

        Args:
            settings: Harness settings
            logger: Logger instance
        """
        self._settings = settings
        self._logger = logger
        self._timeout = settings.request_timeout
        self._client: httpx.AsyncClient | None = None
        self._last_latency_ms: int = 0

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def last_latency_ms(self) -> int:
        return self._last_latency_ms

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self._settings.api_key is not None:
            headers["x-api-key"] = self._settings.api_key.get_secret_value()
        return headers

    async def _exchange(
        self,
        method: str,
        url: str,
        *,
        query: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> httpx.Response:
        """
        Issue one request and return the response, whatever its status.

        Args:
            method: HTTP method
            url: Absolute endpoint URL
            query: Query parameters
            body: JSON body (pydantic models are dumped by alias)

        Raises:
            TransportError: The request could not be sent or received
        """
        headers = self._get_headers()
        json_body = _json_body(body)

        self._logger.debug(
            "API request: %s %s query=%s headers=%s body=%s",
            method,
            url,
            dict(query) if query else {},
            redact_headers(headers),
            redact_sensitive(json_body),
        )

        client = await self._get_client()
        start_time = time.perf_counter()
        try:
            response = await client.request(
                method,
                url,
                headers=headers,
                params=dict(query) if query else None,
                json=json_body,
            )
        except httpx.RequestError as e:
            self._logger.warning("API request to %s failed: %s", url, e)
            raise TransportError(url, e) from e
        self._last_latency_ms = int((time.perf_counter() - start_time) * 1000)

        self._logger.debug(
            "API response: status=%d latency_ms=%d",
            response.status_code,
            self._last_latency_ms,
        )
        return response

    async def send(
        self,
        method: str,
        url: str,
        *,
        query: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> str:
        """
        Send a request and return the raw response text, whatever the status code.

        Raises:
            TransportError: The request could not be sent or received
        """
        response = await self._exchange(method, url, query=query, body=body)
        return response.text

    async def request(
        self,
        method: str,
        url: str,
        response_type: type[T],
        *,
        query: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> T:
        """
        Send a request and decode its body as ``response_type``.

        Raises:
            TransportError: The request could not be sent or received
            HttpStatusError: The server answered with a non-2xx status
            DecodeError: The body does not match ``response_type``
        """
        response = await self._exchange(method, url, query=query, body=body)
        if not response.is_success:
            self._logger.warning(
                "API request to %s returned status %d", url, response.status_code
            )
            raise HttpStatusError(url, response.status_code, response.text)
        return decode(response.text, response_type, url)
