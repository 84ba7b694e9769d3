"""Async Python client for the DNSimple API v2.

The client sends every call through a pluggable fetcher (``httpx`` by
default), maps error statuses to typed exceptions and offers helpers to walk
paginated list endpoints:

- ``DNSimpleClient``: configuration plus one attribute per resource group
- ``iterate_all`` / ``collect_all``: lazy and eager traversal of list endpoints
- ``dnsimple_client.errors``: exception taxonomy
- ``dnsimple_client.testing``: stub fetchers and response factories

Example:
    ```python
    from dnsimple_client import DNSimpleClient, iterate_all

    async with DNSimpleClient.from_env(require_token=True) as client:
        whoami = await client.identity.whoami()
        account = whoami["data"]["account"]["id"]

        async for domain in iterate_all(client.domains.list_domains, account, params={"sort": "name:asc"}):
            print(domain["name"], domain["expires_at"])
    ```
"""

from dnsimple_client.client import VERSION, DNSimpleClient
from dnsimple_client.config import ClientConfig
from dnsimple_client.pagination import PaginationInfo, collect_all, iterate_all, paginate

__version__ = VERSION

__all__ = [
    "ClientConfig",
    "DNSimpleClient",
    "PaginationInfo",
    "__version__",
    "collect_all",
    "iterate_all",
    "paginate",
]
