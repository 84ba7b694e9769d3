"""Structured exceptions for API errors."""

from typing import Any


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        data: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.data = data


class RequestError(APIError):
    """The API answered with an error status."""

    pass


class AuthenticationError(RequestError):
    """401 Unauthorized."""

    pass


class NotFoundError(RequestError):
    """404 Not Found."""

    pass


class MethodNotAllowedError(RequestError):
    """405 Method Not Allowed."""

    pass


class RateLimitError(RequestError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ClientError(RequestError):
    """Any other 4xx client error, usually a validation failure."""

    def attribute_errors(self) -> dict[str, list[str]] | None:
        """Return the per-attribute validation errors sent by the server.

        Example:
            ```python
            try:
                await client.contacts.create_contact(1010, {})
            except ClientError as e:
                e.attribute_errors()  # {"email": ["can't be blank"]}
            ```
        """
        if isinstance(self.data, dict):
            return self.data.get("errors")
        return None


class ServerError(RequestError):
    """5xx server errors."""

    pass


class RequestTimeoutError(APIError):
    """The transport aborted the call after the configured timeout."""

    pass


class TransportError(APIError):
    """Connection-level failure or a response that cannot be used."""

    pass


class ResponseDecodeError(TransportError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, body: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.body = body


class UnexpectedStatusError(TransportError):
    """Status code outside the ranges the API is documented to return."""

    pass
