"""Contacts used as domain registrants."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Contacts(Resource):
    """Registrant contacts of an account."""

    async def list_contacts(self, account: int, params: QueryParams | None = None) -> Response:
        """GET /{account}/contacts (paginated, ``sort`` supported)"""
        return await self._get(f"/{account}/contacts", params)

    async def create_contact(self, account: int, data: dict[str, Any], params: QueryParams | None = None) -> Response:
        return await self._post(f"/{account}/contacts", data, params)

    async def get_contact(self, account: int, contact: int, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/contacts/{contact}", params)

    async def update_contact(
        self, account: int, contact: int, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._patch(f"/{account}/contacts/{contact}", data, params)

    async def delete_contact(self, account: int, contact: int, params: QueryParams | None = None) -> Response:
        return await self._delete(f"/{account}/contacts/{contact}", params)
