"""DNS zones and zone records."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Zones(Resource):
    """DNS zones and their records."""

    async def list_zones(self, account: int, params: QueryParams | None = None) -> Response:
        """List the zones in the account.

        GET /{account}/zones

        Paginated. Supported params: ``name_like``, ``sort``, ``page``,
        ``per_page``.
        """
        return await self._get(f"/{account}/zones", params)

    async def get_zone(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/zones/{zone}", params)

    async def get_zone_file(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        """Download the zone file. The text is in ``data.zone``."""
        return await self._get(f"/{account}/zones/{zone}/file", params)

    async def check_zone_distribution(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        """Check whether the zone is distributed to every name server."""
        return await self._get(f"/{account}/zones/{zone}/distribution", params)

    async def activate_dns(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        return await self._put(f"/{account}/zones/{zone}/activation", None, params)

    async def deactivate_dns(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        return await self._delete(f"/{account}/zones/{zone}/activation", params)

    async def list_zone_records(self, account: int, zone: str, params: QueryParams | None = None) -> Response:
        """List the records of a zone.

        GET /{account}/zones/{zone}/records

        Paginated. Supported params: ``name_like``, ``name``, ``type``,
        ``sort``, ``page``, ``per_page``.
        """
        return await self._get(f"/{account}/zones/{zone}/records", params)

    async def create_zone_record(
        self, account: int, zone: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._post(f"/{account}/zones/{zone}/records", data, params)

    async def get_zone_record(
        self, account: int, zone: str, record: int, params: QueryParams | None = None
    ) -> Response:
        return await self._get(f"/{account}/zones/{zone}/records/{record}", params)

    async def update_zone_record(
        self, account: int, zone: str, record: int, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._patch(f"/{account}/zones/{zone}/records/{record}", data, params)

    async def delete_zone_record(
        self, account: int, zone: str, record: int, params: QueryParams | None = None
    ) -> Response:
        return await self._delete(f"/{account}/zones/{zone}/records/{record}", params)

    async def check_zone_record_distribution(
        self, account: int, zone: str, record: int, params: QueryParams | None = None
    ) -> Response:
        return await self._get(f"/{account}/zones/{zone}/records/{record}/distribution", params)
