"""API client and request dispatcher."""

import json
import logging
from typing import Any

from dnsimple_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from dnsimple_client.errors.handler import handle_response
from dnsimple_client.params import QueryParams, versioned_path
from dnsimple_client.resources import (
    Accounts,
    Billing,
    Certificates,
    Contacts,
    Domains,
    Identity,
    OAuth,
    Registrar,
    Tlds,
    Webhooks,
    Zones,
)
from dnsimple_client.transport.fetcher import Fetcher, HttpxFetcher

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


class DNSimpleClient:
    """Entry point to the API.

    Resource groups hang off the client as attributes (``client.domains``,
    ``client.zones``, ...); all of them send their calls through
    ``request``.

    Args:
        access_token: Bearer token sent with every request
        base_url: API root, without the ``/v2`` prefix
        fetcher: Transport performing the HTTP calls. Defaults to
            ``HttpxFetcher``.
        timeout: Per-request timeout in seconds
        user_agent: Prepended to the library's own User-Agent

    Example:
        ```python
        async with DNSimpleClient(access_token="...") as client:
            response = await client.identity.whoami()
            account_id = response["data"]["account"]["id"]
        ```
    """

    VERSION = VERSION
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT
    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_USER_AGENT = f"dnsimple-python-client/{VERSION}"

    def __init__(
        self,
        *,
        access_token: str | None = None,
        base_url: str | None = DEFAULT_BASE_URL,
        fetcher: Fetcher | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
        user_agent: str | None = "",
    ) -> None:
        self.access_token = access_token
        self.set_base_url(base_url)
        self.set_timeout(timeout)
        self.user_agent = user_agent or ""
        self.fetcher = fetcher if fetcher is not None else HttpxFetcher()

        self.accounts = Accounts(self)
        self.billing = Billing(self)
        self.certificates = Certificates(self)
        self.contacts = Contacts(self)
        self.domains = Domains(self)
        self.identity = Identity(self)
        self.oauth = OAuth(self)
        self.registrar = Registrar(self)
        self.tlds = Tlds(self)
        self.webhooks = Webhooks(self)
        self.zones = Zones(self)

    @classmethod
    def from_config(cls, config: ClientConfig, *, fetcher: Fetcher | None = None) -> "DNSimpleClient":
        return cls(
            access_token=config.access_token,
            base_url=config.base_url,
            fetcher=fetcher,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    @classmethod
    def from_env(cls, *, fetcher: Fetcher | None = None, **kwargs) -> "DNSimpleClient":
        """Create a client configured from ``DNSIMPLE_*`` environment variables.

        Keyword arguments are passed to ``ClientConfig.from_env``.
        """
        return cls.from_config(ClientConfig.from_env(**kwargs), fetcher=fetcher)

    def set_base_url(self, base_url: str | None) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")

    def set_timeout(self, timeout: float | None) -> None:
        self.timeout = timeout or DEFAULT_TIMEOUT

    @property
    def full_user_agent(self) -> str:
        return f"{self.user_agent} {self.DEFAULT_USER_AGENT}".strip()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.full_user_agent,
        }

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
    ) -> dict[str, Any]:
        """Send one API call and return the decoded JSON payload.

        Args:
            method: HTTP method
            path: Path below the ``/v2`` prefix, e.g. ``/1010/domains``
            body: JSON-serialisable request body, or None
            params: Query parameters

        Returns:
            Decoded response; an empty dict for 204 responses

        Raises:
            APIError subclass for every non-success outcome
        """
        url = self.base_url + versioned_path(path, params)
        logger.debug(f"Request {method} {url}")

        response = await self.fetcher(
            method=method,
            url=url,
            headers=self._headers(),
            body=None if body is None else json.dumps(body),
            timeout=self.timeout,
        )
        logger.debug(f"Response {method} {url}: {response.status}")

        return handle_response(response.status, response.body, response.headers)

    async def aclose(self) -> None:
        """Release the fetcher's connections, if it holds any."""
        close = getattr(self.fetcher, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
