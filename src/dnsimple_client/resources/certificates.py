"""SSL certificates, including Let's Encrypt purchases."""

from typing import Any

from dnsimple_client.params import QueryParams
from dnsimple_client.resources.base import Resource, Response


class Certificates(Resource):
    """SSL certificates: listing, purchase, renewal and issuance."""

    async def list_certificates(self, account: int, domain: str, params: QueryParams | None = None) -> Response:
        """List the certificates of a domain.

        GET /{account}/domains/{domain}/certificates

        Paginated. Supported params: ``sort``, ``page``, ``per_page``.
        """
        return await self._get(f"/{account}/domains/{domain}/certificates", params)

    async def get_certificate(
        self, account: int, domain: str, certificate: int, params: QueryParams | None = None
    ) -> Response:
        return await self._get(f"/{account}/domains/{domain}/certificates/{certificate}", params)

    async def download_certificate(
        self, account: int, domain: str, certificate: int, params: QueryParams | None = None
    ) -> Response:
        """Return the PEM server certificate, root and intermediate chain."""
        return await self._get(f"/{account}/domains/{domain}/certificates/{certificate}/download", params)

    async def get_certificate_private_key(
        self, account: int, domain: str, certificate: int, params: QueryParams | None = None
    ) -> Response:
        return await self._get(f"/{account}/domains/{domain}/certificates/{certificate}/private_key", params)

    async def purchase_letsencrypt_certificate(
        self, account: int, domain: str, data: dict[str, Any], params: QueryParams | None = None
    ) -> Response:
        return await self._post(f"/{account}/domains/{domain}/certificates/letsencrypt", data, params)

    async def issue_letsencrypt_certificate(
        self, account: int, domain: str, purchase_id: int, params: QueryParams | None = None
    ) -> Response:
        return await self._post(
            f"/{account}/domains/{domain}/certificates/letsencrypt/{purchase_id}/issue", None, params
        )
