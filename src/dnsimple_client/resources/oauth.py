"""OAuth authorization code exchange.

See https://developer.dnsimple.com/v2/oauth/
"""

from dnsimple_client.params import to_query_string
from dnsimple_client.resources.base import Resource, Response


class OAuth(Resource):
    """OAuth authorization URL and token exchange."""

    async def exchange_authorization_for_token(
        self,
        *,
        code: str,
        client_id: str,
        client_secret: str,
        state: str,
        redirect_uri: str | None = None,
    ) -> Response:
        """Exchange the short-lived authorization code for an access token.

        Returns:
            ``{"access_token": ..., "token_type": "Bearer", "account_id": ...}``
        """
        body = {
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": redirect_uri,
            "state": state,
        }
        return await self._post("/oauth/access_token", {k: v for k, v in body.items() if v is not None})

    def authorize_url(
        self,
        *,
        client_id: str,
        state: str,
        redirect_uri: str | None = None,
        scope: str | None = None,
    ) -> str:
        """Build the URL to send a user to for authorizing an application."""
        site_url = self._client.base_url.replace("api.", "", 1)
        query = to_query_string(
            {
                "state": state,
                "redirect_uri": redirect_uri,
                "scope": scope,
                "client_id": client_id,
                "response_type": "code",
            }
        )
        return f"{site_url}/oauth/authorize?{query}"
