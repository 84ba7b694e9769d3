"""Testing utilities for code built on the client.

Modules:
    factories: Stub fetchers and page-response factories

Example:
    ```python
    from dnsimple_client import DNSimpleClient, collect_all
    from dnsimple_client.testing import StubFetcher, create_page_response


    async def test_lists_zones():
        fetcher = StubFetcher([create_page_response([{"id": 1}], current_page=1, total_pages=1)])
        client = DNSimpleClient(access_token="token", fetcher=fetcher)

        assert await collect_all(client.zones.list_zones, 1010) == [{"id": 1}]
        assert fetcher.calls[0]["url"].endswith("/v2/1010/zones?page=1")
    ```
"""

from dnsimple_client.testing.factories import (
    RecordingListOperation,
    StubFetcher,
    create_error_response,
    create_page_response,
)

__all__ = [
    "RecordingListOperation",
    "StubFetcher",
    "create_error_response",
    "create_page_response",
]
