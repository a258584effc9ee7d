"""Query options for CrossRef list endpoints and their serialization."""

from .options import NAMED_OPTIONS, FilterValue, QueryOptions
from .serialize import MAX_QUERY_LENGTH, serialize, with_query

__all__ = [
    "QueryOptions",
    "FilterValue",
    "NAMED_OPTIONS",
    "MAX_QUERY_LENGTH",
    "serialize",
    "with_query",
]
