"""Traversal of paginated list endpoints.

Every list endpoint of the API accepts a ``page`` query parameter and answers
with ``{"data": [...], "pagination": {...}}``. The helpers here walk such an
endpoint page by page so callers never write the page-increment loop
themselves.

- ``iterate_all`` is lazy: it yields items one by one and only fetches the
  next page once the current one is exhausted.
- ``collect_all`` is eager: it drains ``iterate_all`` into a list.

Pages are fetched strictly one after another, because whether page N+1
exists is only known from page N's ``total_pages``. A failing fetch ends the
traversal and the exception surfaces where that page's items would have
been produced. There is no retry.

Example:
    ```python
    from dnsimple_client import DNSimpleClient
    from dnsimple_client.pagination import collect_all, iterate_all

    async with DNSimpleClient(access_token="...") as client:
        async for record in iterate_all(
            client.zones.list_zone_records, 1010, "example.com", params={"sort": "name:asc"}
        ):
            print(record["name"], record["content"])

        zones = await collect_all(client.zones.list_zones, 1010)
    ```
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from dnsimple_client.params import QueryParams, with_page

logger = logging.getLogger(__name__)

PageResponse = Mapping[str, Any]


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination metadata attached to a list response."""

    current_page: int = 1
    per_page: int = 0
    total_entries: int | None = None
    total_pages: int = 0

    @classmethod
    def from_response(cls, response: PageResponse) -> "PaginationInfo | None":
        """Parse the ``pagination`` object of a list response.

        Returns:
            PaginationInfo, or None if the response is not paginated
        """
        data = response.get("pagination")
        if not isinstance(data, Mapping):
            return None

        total_entries = data.get("total_entries")
        return cls(
            current_page=int(data.get("current_page") or 1),
            per_page=int(data.get("per_page") or 0),
            total_entries=int(total_entries) if total_entries is not None else None,
            total_pages=int(data.get("total_pages") or 0),
        )

    @property
    def is_empty(self) -> bool:
        return self.total_pages == 0 or self.total_entries == 0


class ListOperation(Protocol):
    """A list endpoint: fixed positional arguments, then the parameter bag.

    All paginated resource methods match this shape, for example
    ``client.zones.list_zones(account, params)``.
    """

    def __call__(self, *args: Any) -> Awaitable[PageResponse]: ...


async def paginate(fetch_page: Callable[[int], Awaitable[PageResponse]]) -> AsyncIterator[Any]:
    """Yield the items of every page returned by ``fetch_page``.

    Args:
        fetch_page: Async function returning the response for a 1-based page

    Yields:
        Items in page order, and in server order within each page
    """
    page = 1
    while True:
        response = await fetch_page(page)
        for item in response.get("data") or []:
            yield item

        pagination = PaginationInfo.from_response(response)
        if pagination is None or pagination.is_empty or page >= pagination.total_pages:
            logger.debug(f"Pagination finished after page {page}")
            return
        page += 1


def iterate_all(
    operation: ListOperation,
    *args: Any,
    params: QueryParams | None = None,
) -> AsyncIterator[Any]:
    """Lazily iterate every item of a paginated list operation.

    Each page is requested with a fresh copy of ``params`` whose ``page`` is
    set by the traversal; ``params`` itself is never modified, so the same
    bag can drive several traversals at once.

    Args:
        operation: The list method, e.g. ``client.domains.list_domains``
        *args: Positional arguments preceding the parameter bag
        params: Filter and sort options kept unchanged across pages

    Returns:
        Single-pass async iterator over the items
    """
    base_params = dict(params or {})

    async def fetch_page(page: int) -> PageResponse:
        logger.debug(f"Fetching page {page} from {getattr(operation, '__name__', operation)}")
        return await operation(*args, with_page(base_params, page))

    return paginate(fetch_page)


async def collect_all(
    operation: ListOperation,
    *args: Any,
    params: QueryParams | None = None,
) -> list[Any]:
    """Fetch every page of a list operation and return all items as a list.

    Issues exactly the requests ``iterate_all`` would, in the same order.
    Prefer ``iterate_all`` for large collections.

    Raises:
        Whatever the first failing page fetch raised; no partial list is
        returned
    """
    return [item async for item in iterate_all(operation, *args, params=params)]
