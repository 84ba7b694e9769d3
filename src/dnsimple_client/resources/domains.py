"""Domains and the per-domain sub-resources: collaborators, email forwards and DNSSEC."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Domains(Resource):
    """Domains with their collaborators, email forwards and DNSSEC settings."""

    async def list_domains(self, account: int, params: QueryParams | None = None) -> Response:
        """List the domains in the account.

        GET /{account}/domains

        Paginated. Supported params: ``name_like``, ``registrant_id``,
        ``sort``, ``page``, ``per_page``.
        """
        return await self._get(f"/{account}/domains", params)

    async def create_domain(
        self, account: int, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        """Create a domain and its zone. ``data`` needs at least ``name``."""
        return await self._post(f"/{account}/domains", data, params)

    async def get_domain(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/domains/{domain}", params)

    async def delete_domain(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._delete(f"/{account}/domains/{domain}", params)

    # Collaborators

    async def list_collaborators(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        """GET /{account}/domains/{domain}/collaborators (paginated)"""
        return await self._get(f"/{account}/domains/{domain}/collaborators", params)

    async def add_collaborator(
        self, account: int, domain: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        """Invite a user by ``email`` to collaborate on the domain."""
        return await self._post(f"/{account}/domains/{domain}/collaborators", data, params)

    async def remove_collaborator(
        self, account: int, domain: str, collaborator: int, params: QueryParams | None = None
    ) -> Response:
        return await self._delete(f"/{account}/domains/{domain}/collaborators/{collaborator}", params)

    # Email forwards

    async def list_email_forwards(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        """GET /{account}/domains/{domain}/email_forwards (paginated)"""
        return await self._get(f"/{account}/domains/{domain}/email_forwards", params)

    async def create_email_forward(
        self, account: int, domain: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._post(f"/{account}/domains/{domain}/email_forwards", data, params)

    async def get_email_forward(
        self, account: int, domain: str, email_forward: int, params: QueryParams | None = None
    ) -> Response:
        return await self._get(f"/{account}/domains/{domain}/email_forwards/{email_forward}", params)

    async def delete_email_forward(
        self, account: int, domain: str, email_forward: int, params: QueryParams | None = None
    ) -> Response:
        return await self._delete(f"/{account}/domains/{domain}/email_forwards/{email_forward}", params)

    # DNSSEC

    async def get_domain_dnssec(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._get(f"/{account}/domains/{domain}/dnssec", params)

    async def enable_domain_dnssec(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._post(f"/{account}/domains/{domain}/dnssec", None, params)

    async def disable_domain_dnssec(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        return await self._delete(f"/{account}/domains/{domain}/dnssec", params)
