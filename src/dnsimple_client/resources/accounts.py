"""Accounts the authenticated entity can access."""

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Accounts(Resource):
    """Accounts the authenticated user can access."""

    async def list_accounts(self, params: QueryParams | None = None) -> Response:
        """GET /accounts"""
        return await self._get("/accounts", params)
