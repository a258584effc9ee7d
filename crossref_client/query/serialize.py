"""Serialization of query options into CrossRef's query-string syntax."""

import logging
from collections.abc import Mapping
from typing import Any, List, Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)

# The whole URL minus the scheme has to stay under 4096 characters. Leaving
# room for the other parameters and for percent-encoding, queries are cut at
# 2000 characters.
MAX_QUERY_LENGTH = 2000

# Characters ``encodeURIComponent`` leaves alone besides letters and digits.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _to_text(value: Any) -> str:
    """Return the plain string form CrossRef expects for *value*."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _filter_clauses(filters: Any) -> List[str]:
    if isinstance(filters, (list, tuple)):
        # Ready-made "name:value" clauses
        return [_to_text(clause) for clause in filters if clause]
    if not isinstance(filters, Mapping):
        # Already in "name:value,name:value" form
        return [_to_text(filters)] if filters else []

    clauses = []
    for name, value in filters.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        clauses.extend(f"{name}:{_to_text(v)}" for v in values)
    return clauses


def serialize(options: Optional[Mapping]) -> str:
    """Turn query options into a query-string fragment (without ``?``).

    Options are emitted in the caller's order:

    * ``query`` is truncated to ``MAX_QUERY_LENGTH`` characters, then
      percent-encoded.
    * ``filter`` clauses for every field are joined with commas into a single
      ``filter=`` parameter; list values give one clause per element. A
      list of ready-made clauses is joined the same way.
    * ``facet`` becomes ``facet=t`` when truthy and is dropped otherwise.
    * anything else is sent as ``key=value``.

    Options set to ``None`` are skipped.

    Args:
        options: A ``QueryOptions`` instance or any mapping.

    Returns:
        The fragment, or an empty string if no option produced a clause.
    """
    clauses: List[str] = []

    for key, value in (options or {}).items():
        if value is None:
            continue

        if key == "query":
            text = _to_text(value)
            if len(text) > MAX_QUERY_LENGTH:
                logger.debug(
                    "Truncating query of %d characters to %d",
                    len(text),
                    MAX_QUERY_LENGTH,
                )
                text = text[:MAX_QUERY_LENGTH]
            clauses.append(f"query={quote(text, safe=_URI_COMPONENT_SAFE)}")
        elif key == "filter":
            filter_clauses = _filter_clauses(value)
            if filter_clauses:
                clauses.append(f"filter={','.join(filter_clauses)}")
        elif key == "facet":
            if value:
                clauses.append("facet=t")
        else:
            clauses.append(f"{key}={_to_text(value)}")

    return "&".join(clauses)


def with_query(path: str, options: Optional[Mapping]) -> str:
    """Append the serialized *options* to *path*, if there are any."""
    fragment = serialize(options)
    return f"{path}?{fragment}" if fragment else path
