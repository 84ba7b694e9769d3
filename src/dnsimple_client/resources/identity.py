"""Identity of the authenticated entity."""

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Identity(Resource):
    """Identity of the current access token."""

    async def whoami(self, params: QueryParams | None = None) -> Response:
        """Return the account and/or user the access token belongs to.

        GET /whoami
        """
        return await self._get("/whoami", params)
