"""Tests for paginated traversal of list operations."""

import asyncio

import pytest

from dnsimple_client import DNSimpleClient
from dnsimple_client.errors import NotFoundError, ServerError
from dnsimple_client.pagination import PaginationInfo, collect_all, iterate_all, paginate
from dnsimple_client.testing import (
    RecordingListOperation,
    StubFetcher,
    create_error_response,
    create_page_response,
)


def three_pages() -> dict:
    return {
        1: create_page_response([{"id": 1}, {"id": 2}], current_page=1, total_pages=3, per_page=2),
        2: create_page_response([{"id": 3}, {"id": 4}], current_page=2, total_pages=3, per_page=2),
        3: create_page_response([{"id": 5}], current_page=3, total_pages=3, per_page=2),
    }


class TestPaginationInfo:
    """Test parsing of pagination metadata."""

    @pytest.mark.unit
    def test_from_response(self):
        info = PaginationInfo.from_response(
            {"data": [], "pagination": {"current_page": 2, "per_page": 30, "total_entries": 45, "total_pages": 2}}
        )

        assert info == PaginationInfo(current_page=2, per_page=30, total_entries=45, total_pages=2)

    @pytest.mark.unit
    def test_from_response_without_pagination(self):
        assert PaginationInfo.from_response({"data": []}) is None

    @pytest.mark.unit
    def test_is_empty(self):
        assert PaginationInfo(total_pages=0).is_empty
        assert PaginationInfo(total_pages=3, total_entries=0).is_empty
        assert not PaginationInfo(total_pages=1, total_entries=1).is_empty
        assert not PaginationInfo(total_pages=1).is_empty


class TestIterateAll:
    """Test the lazy traversal."""

    @pytest.mark.unit
    async def test_yields_items_in_page_order(self):
        """Items come out as page 1 ++ page 2 ++ page 3, in server order."""
        operation = RecordingListOperation(three_pages())

        ids = [item["id"] async for item in iterate_all(operation, 1010)]

        assert ids == [1, 2, 3, 4, 5]

    @pytest.mark.unit
    async def test_stops_after_last_page(self):
        """Exactly total_pages fetches, never a 4th."""
        operation = RecordingListOperation(three_pages())

        async for _ in iterate_all(operation, 1010):
            pass

        assert operation.requested_pages == [1, 2, 3]

    @pytest.mark.unit
    @pytest.mark.parametrize("total_pages", [0, 1])
    async def test_empty_first_page(self, total_pages):
        """An empty first page ends the traversal after one fetch."""
        operation = RecordingListOperation(
            {1: create_page_response([], current_page=1, total_pages=total_pages, total_entries=0)}
        )

        items = [item async for item in iterate_all(operation, 1010)]

        assert items == []
        assert operation.requested_pages == [1]

    @pytest.mark.unit
    async def test_zero_total_entries_ends_traversal(self):
        operation = RecordingListOperation(
            {1: create_page_response([], current_page=1, total_pages=4, total_entries=0)}
        )

        assert [item async for item in iterate_all(operation, 1010)] == []
        assert operation.requested_pages == [1]

    @pytest.mark.unit
    async def test_preserves_params_across_pages(self):
        """Only page changes between fetches; other options are passed verbatim."""
        operation = RecordingListOperation(three_pages())
        params = {"sort": "name:asc", "foo": "bar"}

        async for _ in iterate_all(operation, 1010, "example.com", params=params):
            pass

        assert [call_params for _, call_params in operation.calls] == [
            {"sort": "name:asc", "foo": "bar", "page": 1},
            {"sort": "name:asc", "foo": "bar", "page": 2},
            {"sort": "name:asc", "foo": "bar", "page": 3},
        ]
        assert all(args == (1010, "example.com") for args, _ in operation.calls)

    @pytest.mark.unit
    async def test_does_not_mutate_caller_params(self):
        operation = RecordingListOperation(three_pages())
        params = {"sort": "name:asc", "page": 7}

        async for _ in iterate_all(operation, 1010, params=params):
            pass

        assert params == {"sort": "name:asc", "page": 7}
        assert operation.requested_pages == [1, 2, 3]

    @pytest.mark.unit
    async def test_each_page_gets_its_own_params(self):
        operation = RecordingListOperation(three_pages())

        async for _ in iterate_all(operation, 1010, params={"sort": "name:asc"}):
            pass

        first, second, third = (call_params for _, call_params in operation.calls)
        assert first is not second and second is not third

    @pytest.mark.unit
    async def test_first_page_failure(self):
        """A failing first page raises before any item is produced."""
        operation = RecordingListOperation({1: NotFoundError("Not found", status_code=404)})
        received = []

        with pytest.raises(NotFoundError):
            async for item in iterate_all(operation, 1010):
                received.append(item)

        assert received == []
        assert operation.requested_pages == [1]

    @pytest.mark.unit
    async def test_later_page_failure(self):
        """Pages before the failing one are delivered, then the error surfaces."""
        pages = three_pages()
        pages[3] = ServerError("Server error", status_code=500)
        operation = RecordingListOperation(pages)
        received = []

        with pytest.raises(ServerError):
            async for item in iterate_all(operation, 1010):
                received.append(item["id"])

        assert received == [1, 2, 3, 4]
        assert operation.requested_pages == [1, 2, 3]

    @pytest.mark.unit
    async def test_fetches_lazily(self):
        """The next page is only requested once the current one is used up."""
        operation = RecordingListOperation(three_pages())
        iterator = iterate_all(operation, 1010)

        assert operation.calls == []

        assert (await anext(iterator))["id"] == 1
        assert operation.requested_pages == [1]
        assert (await anext(iterator))["id"] == 2
        assert operation.requested_pages == [1]
        assert (await anext(iterator))["id"] == 3
        assert operation.requested_pages == [1, 2]

    @pytest.mark.unit
    async def test_consumer_can_stop_early(self):
        operation = RecordingListOperation(three_pages())
        iterator = iterate_all(operation, 1010)

        async for item in iterator:
            if item["id"] == 2:
                break
        await iterator.aclose()

        assert operation.requested_pages == [1]

    @pytest.mark.unit
    async def test_not_paginated_response_is_single_page(self):
        operation = RecordingListOperation({1: {"data": [{"id": 1}, {"id": 2}]}})

        assert [item async for item in iterate_all(operation)] == [{"id": 1}, {"id": 2}]
        assert operation.requested_pages == [1]

    @pytest.mark.unit
    async def test_logs_each_page_fetch(self, caplog):
        operation = RecordingListOperation(three_pages())

        with caplog.at_level("DEBUG", logger="dnsimple_client.pagination"):
            async for _ in iterate_all(operation, 1010):
                pass

        assert "Fetching page 1 from recording_list_operation" in caplog.text
        assert "Fetching page 2 from recording_list_operation" in caplog.text
        assert "Fetching page 3 from recording_list_operation" in caplog.text
        assert "Fetching page 4" not in caplog.text
        assert "Pagination finished after page 3" in caplog.text

    @pytest.mark.unit
    async def test_concurrent_traversals_are_independent(self):
        first = RecordingListOperation(three_pages())
        second = RecordingListOperation(three_pages())
        params = {"sort": "name:asc"}

        results = await asyncio.gather(
            collect_all(first, 1010, params=params),
            collect_all(second, 1010, params=params),
        )

        assert [[item["id"] for item in result] for result in results] == [[1, 2, 3, 4, 5]] * 2
        assert first.requested_pages == [1, 2, 3]
        assert second.requested_pages == [1, 2, 3]
        assert params == {"sort": "name:asc"}


class TestCollectAll:
    """Test the eager traversal."""

    @pytest.mark.unit
    async def test_collects_every_item(self):
        operation = RecordingListOperation(three_pages())

        items = await collect_all(operation, 1010)

        assert [item["id"] for item in items] == [1, 2, 3, 4, 5]
        assert operation.requested_pages == [1, 2, 3]

    @pytest.mark.unit
    async def test_matches_drained_iterate_all(self):
        lazy = RecordingListOperation(three_pages())
        eager = RecordingListOperation(three_pages())

        drained = [item async for item in iterate_all(lazy, 1010, params={"sort": "id:desc"})]
        collected = await collect_all(eager, 1010, params={"sort": "id:desc"})

        assert collected == drained
        assert eager.calls == lazy.calls

    @pytest.mark.unit
    async def test_first_page_failure(self):
        operation = RecordingListOperation({1: NotFoundError("Not found", status_code=404)})

        with pytest.raises(NotFoundError):
            await collect_all(operation, 1010)

    @pytest.mark.unit
    async def test_later_page_failure_returns_nothing(self):
        pages = three_pages()
        pages[3] = ServerError("Server error", status_code=503)
        operation = RecordingListOperation(pages)
        result = None

        with pytest.raises(ServerError):
            result = await collect_all(operation, 1010)

        assert result is None
        assert operation.requested_pages == [1, 2, 3]


class TestPaginate:
    """Test the low-level page loop."""

    @pytest.mark.unit
    async def test_passes_page_numbers(self):
        pages = three_pages()
        requested = []

        async def fetch_page(page):
            requested.append(page)
            return pages[page]

        items = [item["id"] async for item in paginate(fetch_page)]

        assert items == [1, 2, 3, 4, 5]
        assert requested == [1, 2, 3]


class TestWithClient:
    """Test traversal through a real client and a stub fetcher."""

    @pytest.mark.unit
    async def test_list_zones_traversal(self):
        fetcher = StubFetcher(
            [
                create_page_response([{"id": 1}, {"id": 2}], current_page=1, total_pages=2, per_page=2),
                create_page_response([{"id": 3}], current_page=2, total_pages=2, per_page=2),
            ]
        )
        client = DNSimpleClient(access_token="token", fetcher=fetcher)

        zones = await collect_all(client.zones.list_zones, 1010, params={"sort": "name:asc"})

        assert [zone["id"] for zone in zones] == [1, 2, 3]
        assert [call["url"] for call in fetcher.calls] == [
            "https://api.dnsimple.com/v2/1010/zones?sort=name%3Aasc&page=1",
            "https://api.dnsimple.com/v2/1010/zones?sort=name%3Aasc&page=2",
        ]

    @pytest.mark.unit
    async def test_nested_page_does_not_shadow_cursor(self):
        fetcher = StubFetcher(
            [
                create_page_response([{"id": 1}], current_page=1, total_pages=2, per_page=1),
                create_page_response([{"id": 2}], current_page=2, total_pages=2, per_page=1),
            ]
        )
        client = DNSimpleClient(access_token="token", fetcher=fetcher)

        zones = await collect_all(client.zones.list_zones, 1010, params={"page": 5, "filter": {"page": 9}})

        assert [zone["id"] for zone in zones] == [1, 2]
        assert [call["url"] for call in fetcher.calls] == [
            "https://api.dnsimple.com/v2/1010/zones?page=1",
            "https://api.dnsimple.com/v2/1010/zones?page=2",
        ]

    @pytest.mark.unit
    async def test_http_error_stops_traversal(self):
        fetcher = StubFetcher(
            [
                create_page_response([{"id": 1}], current_page=1, total_pages=2),
                create_error_response(404, "Zone `example.com` not found"),
            ]
        )
        client = DNSimpleClient(access_token="token", fetcher=fetcher)
        received = []

        with pytest.raises(NotFoundError, match="not found"):
            async for record in iterate_all(client.zones.list_zone_records, 1010, "example.com"):
                received.append(record)

        assert received == [{"id": 1}]
        assert len(fetcher.calls) == 2
