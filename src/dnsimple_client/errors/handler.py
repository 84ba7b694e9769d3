"""Error handling utilities for HTTP responses."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from dnsimple_client.errors.exceptions import (
    AuthenticationError,
    ClientError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


def decode_body(body: str, status_code: int | None = None) -> Any:
    """Decode a JSON response body.

    An empty body decodes to an empty dict.

    Raises:
        ResponseDecodeError: If the body is not valid JSON
    """
    if not body or not body.strip():
        return {}
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ResponseDecodeError(
            f"Malformed JSON in response body: {e}",
            body=body,
            status_code=status_code,
        ) from e


def _error_message(data: Any, fallback: str) -> str:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return fallback


def _parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    if not headers:
        return None
    for key, value in headers.items():
        if key.lower() == "retry-after":
            try:
                return int(value)
            except (ValueError, TypeError):
                return None
    return None


def handle_response(
    status_code: int,
    body: str,
    headers: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Turn a raw status and body into a decoded payload or an exception.

    Args:
        status_code: HTTP status code
        body: Raw response body text
        headers: Response headers, used for Retry-After on 429

    Returns:
        Decoded JSON payload, or an empty dict for 204 and empty bodies

    Raises:
        RequestError subclass based on status code, ResponseDecodeError for
        bodies that are not JSON, UnexpectedStatusError for anything else
    """
    if status_code == 401:
        data = decode_body(body, status_code)
        raise AuthenticationError(
            _error_message(data, "Authentication error"), status_code=status_code, data=data
        )

    if status_code == 404:
        data = decode_body(body, status_code)
        raise NotFoundError(_error_message(data, "Not found"), status_code=status_code, data=data)

    if status_code == 405:
        raise MethodNotAllowedError("Method not allowed", status_code=status_code)

    if status_code == 429:
        raise RateLimitError(
            "Too many requests",
            retry_after=_parse_retry_after(headers),
            status_code=status_code,
        )

    if 400 <= status_code < 500:
        data = decode_body(body, status_code)
        raise ClientError(_error_message(data, "Bad request"), status_code=status_code, data=data)

    if status_code == 204:
        return {}

    if 200 <= status_code < 300:
        return decode_body(body, status_code)

    if status_code >= 500:
        data = decode_body(body, status_code)
        raise ServerError(_error_message(data, "Server error"), status_code=status_code, data=data)

    logger.warning(f"Unsupported status code in response: {status_code}")
    raise UnexpectedStatusError(f"Unsupported status code: {status_code}", status_code=status_code)
