"""Client configuration.

Settings can be given explicitly or read from the environment (and from a
.env file through ``CredentialResolver``):

| Variable | Setting |
|----------|---------|
| ``DNSIMPLE_TOKEN`` | access token |
| ``DNSIMPLE_TOKEN_FILE`` | file holding the access token, used when ``DNSIMPLE_TOKEN`` is unset |
| ``DNSIMPLE_BASE_URL`` | API base URL |
| ``DNSIMPLE_TIMEOUT`` | per-request timeout in seconds |
| ``DNSIMPLE_USER_AGENT`` | prefix for the User-Agent header |
"""

import logging
from dataclasses import dataclass

from dnsimple_client.auth.credentials import CredentialResolver
from dnsimple_client.auth.exceptions import ConfigError, CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dnsimple.com"
DEFAULT_TIMEOUT = 120.0

TOKEN_ENV_VAR = "DNSIMPLE_TOKEN"
TOKEN_FILE_ENV_VAR = "DNSIMPLE_TOKEN_FILE"
BASE_URL_ENV_VAR = "DNSIMPLE_BASE_URL"
TIMEOUT_ENV_VAR = "DNSIMPLE_TIMEOUT"
USER_AGENT_ENV_VAR = "DNSIMPLE_USER_AGENT"


@dataclass
class ClientConfig:
    """Settings shared by every request a client makes."""

    access_token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds, per HTTP call
    user_agent: str = ""

    @classmethod
    def from_env(
        cls,
        *,
        resolver: CredentialResolver | None = None,
        require_token: bool = False,
    ) -> "ClientConfig":
        """Build a configuration from environment variables.

        Raises:
            CredentialNotFoundError: If ``require_token`` and no token is set
            ConfigError: If ``DNSIMPLE_TIMEOUT`` is not a positive number
        """
        resolver = resolver or CredentialResolver()

        access_token = resolver.resolve(env_var_name=TOKEN_ENV_VAR)
        if access_token is None:
            access_token = resolver.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR)
        if require_token and not access_token:
            raise CredentialNotFoundError(
                f"Access token not found (checked {TOKEN_ENV_VAR} and {TOKEN_FILE_ENV_VAR})",
                env_var_name=TOKEN_ENV_VAR,
            )

        raw_timeout = resolver.resolve(env_var_name=TIMEOUT_ENV_VAR, mask_in_logs=False)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigError(
                    f"{TIMEOUT_ENV_VAR} must be a number of seconds, got {raw_timeout!r}",
                    setting=TIMEOUT_ENV_VAR,
                ) from None
            if timeout <= 0:
                raise ConfigError(f"{TIMEOUT_ENV_VAR} must be positive, got {timeout}", setting=TIMEOUT_ENV_VAR)

        return cls(
            access_token=access_token,
            base_url=resolver.resolve(env_var_name=BASE_URL_ENV_VAR, default=DEFAULT_BASE_URL, mask_in_logs=False)
            or DEFAULT_BASE_URL,
            timeout=timeout,
            user_agent=resolver.resolve(env_var_name=USER_AGENT_ENV_VAR, default="", mask_in_logs=False) or "",
        )
