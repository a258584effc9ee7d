"""crossref_client: a small client for the CrossRef REST API.

Quick Start:
    ```python
    import crossref_client as xref

    # A single work, by DOI
    work = xref.work("10.1037/0003-066X.59.1.29")

    # A page of works, and the next one
    page = xref.works(query="ocean acidification", filter={"type": "journal-article"})
    if not page.is_done:
        page = xref.works(page.next_options)
    ```

Item functions (``work``, ``funder``, ``prefix``, ``member``, ``type``,
``journal``) return the resource. List functions (``works``, ``funders``,
``members``, ``types``, ``licenses``, ``journals`` and the ``*_works``
functions) return a ``PageResult``. Failures raise a ``CrossRefError``.

``type`` is left out of ``__all__`` so that a star import does not shadow
the builtin; use ``crossref_client.type`` or ``crossref.type``.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from ._core import CROSSREF_API_URL, DEFAULT_TIMEOUT, PageResult, RequestConfig
from .api import CrossRefAPI, build_api, crossref
from .endpoints import ENDPOINTS, Endpoint, Kind
from .exceptions import (
    CrossRefError,
    MalformedResponseError,
    NotFoundError,
    TransportError,
    UpstreamError,
)
from .fetchers import item, item_list, listing
from .query import QueryOptions, serialize

work = crossref.work
funder = crossref.funder
prefix = crossref.prefix
member = crossref.member
type = crossref.type
journal = crossref.journal

funder_works = crossref.funder_works
prefix_works = crossref.prefix_works
member_works = crossref.member_works
journal_works = crossref.journal_works
type_works = crossref.type_works

works = crossref.works
funders = crossref.funders
members = crossref.members
types = crossref.types
licenses = crossref.licenses
journals = crossref.journals

logger = logging.getLogger(__name__)

__all__ = [
    # api.py
    "CrossRefAPI",
    "build_api",
    "crossref",
    "work",
    "funder",
    "prefix",
    "member",
    "journal",
    "funder_works",
    "prefix_works",
    "member_works",
    "journal_works",
    "type_works",
    "works",
    "funders",
    "members",
    "types",
    "licenses",
    "journals",
    # fetchers.py
    "item",
    "item_list",
    "listing",
    # endpoints.py
    "ENDPOINTS",
    "Endpoint",
    "Kind",
    # _core
    "PageResult",
    "RequestConfig",
    "CROSSREF_API_URL",
    "DEFAULT_TIMEOUT",
    # query
    "QueryOptions",
    "serialize",
    # exceptions.py
    "CrossRefError",
    "TransportError",
    "NotFoundError",
    "UpstreamError",
    "MalformedResponseError",
]

try:
    __version__ = version("crossref-client")
except PackageNotFoundError:
    __version__ = "0.0.0"
