"""Exceptions raised while resolving credentials and client settings.

Example:
    ```python
    from dnsimple_client.auth.exceptions import CredentialNotFoundError

    try:
        config = ClientConfig.from_env(require_token=True)
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} to your API access token")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential and configuration errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass


class ConfigError(CredentialError):
    """Raised when a setting has a value the client cannot use."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message)
        self.setting = setting
