"""The public CrossRef namespace.

``build_api`` binds every entry of the endpoint table to a request
configuration. The package exposes a default instance, ``crossref``, whose
functions are also available at package level:

    >>> import crossref_client as xref
    >>> xref.work("10.1037/0003-066X.59.1.29")["title"]  # doctest: +SKIP
    >>> page = xref.works(query="ocean acidification", rows=5)  # doctest: +SKIP
    >>> page = xref.works(page.next_options)  # doctest: +SKIP
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ._core import PageResult, RequestConfig
from .endpoints import ENDPOINTS
from .fetchers import fetcher_for

logger = logging.getLogger(__name__)

ItemFunction = Callable[[str], Dict[str, Any]]
ListFunction = Callable[..., PageResult]


@dataclass(frozen=True)
class CrossRefAPI:
    """Every CrossRef endpoint function, bound to one configuration.

    Item functions take the resource identifier and return the resource.
    List functions take optional query options (plus the identifier for the
    ``*_works`` functions) and return a ``PageResult``.
    """

    config: RequestConfig

    work: ItemFunction
    funder: ItemFunction
    prefix: ItemFunction
    member: ItemFunction
    type: ItemFunction
    journal: ItemFunction

    funder_works: ListFunction
    prefix_works: ListFunction
    member_works: ListFunction
    journal_works: ListFunction
    type_works: ListFunction

    works: ListFunction
    funders: ListFunction
    members: ListFunction
    types: ListFunction
    licenses: ListFunction
    journals: ListFunction


def build_api(config: Optional[RequestConfig] = None) -> CrossRefAPI:
    """Build the endpoint namespace for *config*.

    Parameters:
        config: Request configuration; defaults to the public API with
            ``CROSSREF_MAILTO`` picked up from the environment.

    Returns:
        A read-only namespace of endpoint functions.

    Examples:
        >>> api = build_api(RequestConfig(mailto="me@example.org"))
        >>> api.journal("0028-0836")  # doctest: +SKIP
    """
    config = config or RequestConfig.from_env()
    logger.debug("Binding %d CrossRef endpoints to %s", len(ENDPOINTS), config.base_url)
    functions = {
        name: fetcher_for(endpoint, config) for name, endpoint in ENDPOINTS.items()
    }
    for name, function in functions.items():
        function.__name__ = function.__qualname__ = name
    return CrossRefAPI(config=config, **functions)


crossref = build_api()
