"""Generic fetchers behind every CrossRef endpoint.

``item``, ``item_list`` and ``listing`` build endpoint functions from a URL
template. Each call issues exactly one request and either returns its result
or raises a ``CrossRefError``; pagination is driven by the caller passing
``PageResult.next_options`` back in.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Union

from ._core import PageResult, RequestConfig, request, require_non_empty
from .endpoints import Endpoint, Kind
from .query import QueryOptions, with_query

EndpointLike = Union[Endpoint, str]


def _as_endpoint(endpoint: EndpointLike, kind: Kind) -> Endpoint:
    if isinstance(endpoint, Endpoint):
        return endpoint
    return Endpoint(endpoint, kind)


def fetch_item(
    endpoint: Endpoint, param: str, config: Optional[RequestConfig] = None
) -> Dict[str, Any]:
    """Fetch the single resource *param* from an item endpoint.

    Raises:
        ValueError: if *param* is empty.
        CrossRefError: if the request fails.
    """
    require_non_empty({"param": param}, ["param"])
    return request(endpoint.resolve(param), config)


def fetch_page(
    path: str,
    options: Optional[Mapping] = None,
    config: Optional[RequestConfig] = None,
) -> PageResult:
    """Fetch one page of a list endpoint.

    Args:
        path: Resolved endpoint path, without a query string.
        options: ``QueryOptions`` or a plain mapping; never modified.
        config: Request configuration.

    Returns:
        The page, with ``next_options`` set up for the following one.

    Raises:
        ValueError: if ``offset`` or ``rows`` is not a non-negative integer.
        CrossRefError: if the request fails.
    """
    config = config or RequestConfig()
    options = QueryOptions.coerce(options).validate()
    resolved = with_query(path, options)
    message = request(resolved, config)
    return PageResult.from_message(
        message, options, url=f"{config.base_url}{resolved}"
    )


def _merge(options: Optional[Mapping], extra: Dict[str, Any]) -> Optional[Mapping]:
    if not extra:
        return options
    return QueryOptions.coerce(options).parameters(**extra)


def item(
    endpoint: EndpointLike, config: Optional[RequestConfig] = None
) -> Callable[[str], Dict[str, Any]]:
    """Make a function returning one resource, e.g. ``work(doi)``.

    Args:
        endpoint: An ``Endpoint`` or a URL template such as ``"works/{param}"``.
        config: Request configuration shared by every call.
    """
    endpoint = _as_endpoint(endpoint, Kind.ITEM)

    def fetch(param: str) -> Dict[str, Any]:
        return fetch_item(endpoint, param, config)

    fetch.__doc__ = f"GET {endpoint.url_template} and return the resource."
    return fetch


def item_list(
    endpoint: EndpointLike, config: Optional[RequestConfig] = None
) -> Callable[..., PageResult]:
    """Make a function listing the works below one resource.

    The function is called as ``fetch(param, options=None, **options)``;
    keyword options are applied on top of *options*.
    """
    endpoint = _as_endpoint(endpoint, Kind.LIST)

    def fetch(
        param: str, options: Optional[Mapping] = None, **kwargs: Any
    ) -> PageResult:
        require_non_empty({"param": param}, ["param"])
        return fetch_page(endpoint.resolve(param), _merge(options, kwargs), config)

    fetch.__doc__ = f"GET one page of {endpoint.url_template}."
    return fetch


def listing(
    endpoint: EndpointLike, config: Optional[RequestConfig] = None
) -> Callable[..., PageResult]:
    """Make a function listing a collection root, e.g. ``works(rows=5)``."""
    endpoint = _as_endpoint(endpoint, Kind.LIST)

    def fetch(options: Optional[Mapping] = None, **kwargs: Any) -> PageResult:
        return fetch_page(endpoint.url_template, _merge(options, kwargs), config)

    fetch.__doc__ = f"GET one page of {endpoint.url_template}."
    return fetch


def fetcher_for(
    endpoint: Endpoint, config: Optional[RequestConfig] = None
) -> Callable[..., Any]:
    """Build the endpoint function matching *endpoint*'s kind and template."""
    if endpoint.kind is Kind.ITEM:
        return item(endpoint, config)
    if endpoint.parameterized:
        return item_list(endpoint, config)
    return listing(endpoint, config)
