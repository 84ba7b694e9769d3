"""Registrar operations: availability, registration, transfer and renewal."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Registrar(Resource):
    """Domain registration, transfer, renewal and registry settings."""

    def _path(self, account: int, domain: str, suffix: str = "") -> str:
        return f"/{account}/registrar/domains/{domain}{suffix}"

    async def check_domain(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        """Check whether a domain is available for registration."""
        return await self._get(self._path(account, domain, "/check"), params)

    async def get_domain_prices(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._get(self._path(account, domain, "/prices"), params)

    async def register_domain(
        self, account: int, domain: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        """Register a domain. ``data`` needs at least ``registrant_id``."""
        return await self._post(self._path(account, domain, "/registrations"), data, params)

    async def transfer_domain(
        self, account: int, domain: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._post(self._path(account, domain, "/transfers"), data, params)

    async def renew_domain(
        self, account: int, domain: str, data: dict[str, Any] | None = None, params: QueryParams | None = None
    ) -> Response:
        return await self._post(self._path(account, domain, "/renewals"), data or {}, params)

    async def enable_domain_auto_renewal(
        self, account: int, domain: str, params: QueryParams | None = None
    ) -> Response:
        return await self._put(self._path(account, domain, "/auto_renewal"), None, params)

    async def disable_domain_auto_renewal(
        self, account: int, domain: str, params: QueryParams | None = None
    ) -> Response:
        return await self._delete(self._path(account, domain, "/auto_renewal"), params)

    async def get_whois_privacy(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._get(self._path(account, domain, "/whois_privacy"), params)

    async def enable_whois_privacy(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._put(self._path(account, domain, "/whois_privacy"), None, params)

    async def disable_whois_privacy(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._delete(self._path(account, domain, "/whois_privacy"), params)
