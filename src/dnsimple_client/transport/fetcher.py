"""Pluggable HTTP fetchers.

A fetcher performs exactly one HTTP request and reports the raw status code
and body text. It never raises on an HTTP status, even 4xx or 5xx; mapping
statuses to exceptions is the dispatcher's job. It raises
``RequestTimeoutError`` when the call exceeds ``timeout`` seconds and
``TransportError`` on connection-level failures and undecodable responses.

The default ``HttpxFetcher`` does not retry. Retries, proxies and test
doubles plug in through the ``transport`` argument, which accepts any
``httpx.AsyncBaseTransport``.

Example:
    ```python
    import httpx

    from dnsimple_client import DNSimpleClient
    from dnsimple_client.transport import HttpxFetcher

    fetcher = HttpxFetcher(transport=httpx.AsyncHTTPTransport(retries=2))
    async with DNSimpleClient(access_token="...", fetcher=fetcher) as client:
        await client.identity.whoami()
    ```
"""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from dnsimple_client.errors.exceptions import RequestTimeoutError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResponse:
    """Raw outcome of one HTTP request."""

    status: int
    body: str
    headers: dict[str, str] | None = None


class Fetcher(Protocol):
    """Callable that performs a single HTTP request."""

    async def __call__(
        self,
        *,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
        timeout: float,
    ) -> FetchResponse: ...


class HttpxFetcher:
    """Fetcher backed by ``httpx.AsyncClient``.

    Args:
        transport: Optional httpx transport to send requests through
        client: Optional pre-configured ``httpx.AsyncClient``. When given,
            the fetcher does not close it.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    async def __aenter__(self):
        """Enter async context."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, closing the owned client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __call__(
        self,
        *,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
        timeout: float,
    ) -> FetchResponse:
        """Send the request and return its status and body text.

        Raises:
            RequestTimeoutError: If the request exceeded ``timeout`` seconds
            TransportError: On connection-level failures, redirect loops and
                responses whose content encoding cannot be decoded
        """
        client = self._get_client()
        try:
            response = await client.request(
                method,
                url,
                headers=headers,
                content=body,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Request {method} {url} timed out after {timeout}s")
            raise RequestTimeoutError(f"Request timed out after {timeout}s") from e
        except httpx.RequestError as e:
            logger.warning(f"Request {method} {url} failed with {e}")
            raise TransportError(f"Request failed: {e}") from e

        return FetchResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
