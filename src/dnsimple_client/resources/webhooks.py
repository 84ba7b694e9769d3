"""Webhooks notified about account events."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Webhooks(Resource):
    """Webhook subscriptions of an account."""

    async def list_webhooks(self, account: int, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/webhooks", params)

    async def create_webhook(self, account: int, data: dict[str, Any], params: QueryParams | None = None) -> Response:
        """Register a webhook. ``data`` needs ``url``."""
        return await self._post(f"/{account}/webhooks", data, params)

    async def get_webhook(self, account: int, webhook: int, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/webhooks/{webhook}", params)

    async def delete_webhook(self, account: int, webhook: int, params: QueryParams | None = None) -> Response:
        return await self._delete(f"/{account}/webhooks/{webhook}", params)
