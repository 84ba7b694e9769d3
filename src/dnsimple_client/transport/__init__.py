"""Transport layer: one HTTP request in, raw status and body out.

Modules:
    fetcher: ``Fetcher`` protocol and the default ``HttpxFetcher``

Example:
    ```python
    from dnsimple_client.transport import HttpxFetcher

    fetcher = HttpxFetcher()
    response = await fetcher(
        method="GET",
        url="https://api.dnsimple.com/v2/whoami",
        headers={"Authorization": "Bearer token"},
        body=None,
        timeout=10.0,
    )
    ```
"""

from dnsimple_client.transport.fetcher import Fetcher, FetchResponse, HttpxFetcher

__all__ = ["FetchResponse", "Fetcher", "HttpxFetcher"]
