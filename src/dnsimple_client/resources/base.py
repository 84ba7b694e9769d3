"""Shared base for resource groups."""

from typing import TYPE_CHECKING, Any

from dnsimple_client.params import QueryParams

if TYPE_CHECKING:
    from dnsimple_client.client import DNSimpleClient

Response = dict[str, Any]


class Resource:
    """A group of API methods sharing one client."""

    def __init__(self, client: "DNSimpleClient") -> None:
        self._client = client

    async def _get(self, path: str, params: QueryParams | None = None) -> Response:
        return await self._client.request("GET", path, None, params)

    async def _post(self, path: str, body: Any = None, params: QueryParams | None = None) -> Response:
        return await self._client.request("POST", path, body, params)

    async def _put(self, path: str, body: Any = None, params: QueryParams | None = None) -> Response:
        return await self._client.request("PUT", path, body, params)

    async def _patch(self, path: str, body: Any = None, params: QueryParams | None = None) -> Response:
        return await self._client.request("PATCH", path, body, params)

    async def _delete(self, path: str, params: QueryParams | None = None) -> Response:
        return await self._client.request("DELETE", path, None, params)
