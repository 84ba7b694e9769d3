"""Billing charges."""

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Billing(Resource):
    """Billing charges of an account."""

    async def list_charges(self, account: int, params: QueryParams | None = None) -> Response:
        """List the billing charges of the account.

        GET /{account}/billing/charges

        Paginated. Supported params: ``start_date``, ``end_date``,
        ``sort`` (``invoiced:asc`` or ``invoiced:desc``), ``page``,
        ``per_page``.
        """
        return await self._get(f"/{account}/billing/charges", params)
