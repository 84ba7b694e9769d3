"""Top-level domains supported for registration and transfer."""

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Tlds(Resource):
    """Top-level domains supported by the registrar."""

    async def list_tlds(self, params: QueryParams | None = None) -> Response:
        """GET /tlds (paginated, ``sort`` supported)"""
        return await self._get("/tlds", params)

    async def get_tld(self, tld: str, params: QueryParams | None = None) -> Response:
        return await self._get(f"/tlds/{tld}", params)

    async def get_tld_extended_attributes(self, tld: str, params: QueryParams | None = None) -> Response:
        """Extended attributes a registration under ``tld`` requires."""
        return await self._get(f"/tlds/{tld}/extended_attributes", params)
