"""Query parameter handling shared by the dispatcher and the paginator."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

QueryValue = str | int | float | bool | None
QueryParams = Mapping[str, Any]


def _flatten(params: QueryParams) -> dict[str, Any]:
    # Legacy callers pass filters as {"filter": {...}} or {"query": {...}}.
    # Top-level keys win over nested ones, so an explicit page is never shadowed.
    flat: dict[str, Any] = {}
    for value in params.values():
        if isinstance(value, Mapping):
            flat.update(value)
    for name, value in params.items():
        if not isinstance(value, Mapping):
            flat[name] = value
    return flat


def to_query_string(params: QueryParams | None) -> str:
    """Encode a parameter bag as a query string.

    ``None`` and ``False`` values are dropped, ``True`` emits the bare key.

    Example:
        ```python
        to_query_string({"sort": "name:asc", "page": 2, "active": True, "x": None})
        # 'sort=name%3Aasc&page=2&active'
        ```
    """
    if not params:
        return ""

    parts = []
    for name, value in _flatten(params).items():
        if value is None or value is False:
            continue
        part = quote(str(name), safe="")
        if value is not True:
            part += "=" + quote(str(value), safe="")
        parts.append(part)
    return "&".join(parts)


def versioned_path(path: str, params: QueryParams | None = None) -> str:
    """Prefix ``path`` with the API version and append the query string."""
    result = f"/v2{path}"
    query_string = to_query_string(params)
    if query_string:
        result = f"{result}?{query_string}"
    return result


def with_page(params: QueryParams | None, page: int) -> dict[str, Any]:
    """Return a copy of ``params`` with ``page`` set; the input is not modified."""
    merged = dict(params or {})
    merged["page"] = page
    return merged
