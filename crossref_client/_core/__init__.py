"""Request execution, envelope validation and page models."""

from ._models import PageResult
from ._request import CROSSREF_API_URL, DEFAULT_TIMEOUT, RequestConfig, request
from ._validators import require_non_empty, unwrap_envelope

__all__ = [
    "PageResult",
    "RequestConfig",
    "request",
    "CROSSREF_API_URL",
    "DEFAULT_TIMEOUT",
    "require_non_empty",
    "unwrap_envelope",
]
