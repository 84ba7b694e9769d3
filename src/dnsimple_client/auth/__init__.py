"""Credential resolution for the API client.

Example:
    ```python
    from dnsimple_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="DNSIMPLE_TOKEN", required=True)
    ```
"""

from dnsimple_client.auth.credentials import CredentialResolver
from dnsimple_client.auth.exceptions import (
    ConfigError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "ConfigError",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
