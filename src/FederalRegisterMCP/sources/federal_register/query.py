"""Federal Register query string compiler.

Encodes a ``DocumentQuery`` with the API's bracketed conventions:
``conditions[k]=v``, ``conditions[k][]=v`` (repeated), ``conditions[k][sub]=v``
and ``fields[]=f`` (repeated), followed by the top-level paging/sort keys.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from FederalRegisterMCP.core.query import ConditionValue, DocumentQuery, Multi, Nested, Scalar

CONDITIONS_PREFIX = "conditions"
# Brackets stay literal in keys; everything else is percent-encoded.
_KEY_SAFE = "[]"


def build_query_string(query: DocumentQuery) -> str:
    """Compile a query into the exact URL query string the API expects.

    Conditions come first (in mapping order), then selected fields, then
    ``per_page``, ``page``, ``order`` and ``format``. ``None`` values are
    omitted; paging/sort keys are also omitted when zero or empty.

    Args:
        query: Structured filter, field selection and paging controls.

    Returns:
        Encoded query string without a leading ``?``; empty when nothing is set.
    """
    pairs: list[tuple[str, str]] = []

    for key, condition in query.conditions.items():
        pairs.extend(_condition_pairs(f"{CONDITIONS_PREFIX}[{key}]", condition))

    for field_name in query.fields:
        _append(pairs, "fields[]", field_name)

    for key, value in (
        ("per_page", query.per_page),
        ("page", query.page),
        ("order", query.order),
        ("format", query.format),
    ):
        if value:
            _append(pairs, key, value)

    return _encode(pairs)


def build_url(base_url: str, endpoint: str, query: DocumentQuery | None = None) -> str:
    """Join base URL, endpoint and compiled query; no ``?`` for an empty query."""
    url = f"{base_url.rstrip('/')}{endpoint}"
    query_string = build_query_string(query) if query is not None else ""
    return f"{url}?{query_string}" if query_string else url


def _condition_pairs(key: str, condition: ConditionValue) -> list[tuple[str, str]]:
    """Expand one condition into key/value pairs according to its variant."""
    pairs: list[tuple[str, str]] = []
    if isinstance(condition, Scalar):
        _append(pairs, key, condition.value)
    elif isinstance(condition, Multi):
        for item in condition.values:
            _append(pairs, f"{key}[]", item)
    elif isinstance(condition, Nested):
        for sub_key, sub_value in condition.items.items():
            _append(pairs, f"{key}[{sub_key}]", sub_value)
    else:
        raise TypeError(f"Unsupported condition value for {key}: {type(condition).__name__}")
    return pairs


def _append(pairs: list[tuple[str, str]], key: str, value: Any) -> None:
    if value is None:
        return
    pairs.append((key, _stringify(value)))


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encode(pairs: list[tuple[str, str]]) -> str:
    return "&".join(
        f"{quote(key, safe=_KEY_SAFE)}={quote(value, safe='')}" for key, value in pairs
    )
