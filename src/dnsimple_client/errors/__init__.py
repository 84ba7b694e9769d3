"""Error taxonomy and status-code mapping for API responses."""

from dnsimple_client.errors.exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitError,
    RequestError,
    RequestTimeoutError,
    ResponseDecodeError,
    ServerError,
    TransportError,
    UnexpectedStatusError,
)
from dnsimple_client.errors.handler import decode_body, handle_response

__all__ = [
    "APIError",
    "AuthenticationError",
    "ClientError",
    "MethodNotAllowedError",
    "NotFoundError",
    "RateLimitError",
    "RequestError",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "ServerError",
    "TransportError",
    "UnexpectedStatusError",
    "decode_body",
    "handle_response",
]
