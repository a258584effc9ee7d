"""Simple data models shared across the package."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..exceptions import MalformedResponseError
from ..query import QueryOptions

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageResult:
    """One page of a CrossRef list endpoint.

    Attributes:
        objects: The upstream ``items`` array, in the order CrossRef sent it.
        next_options: The request options for the following page.
        is_done: True when there is no following page.
        message: The envelope message with ``items`` detached.

    A page unpacks as ``objects, next_options, is_done, message``.
    """

    objects: List[Any]
    next_options: QueryOptions
    is_done: bool
    message: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_message(
        cls,
        message: Any,
        options: Optional[Mapping] = None,
        url: Optional[str] = None,
    ) -> "PageResult":
        """Split a list envelope message and work out the continuation.

        When the message carries ``items-per-page`` and ``query.start-index``
        the next offset is their sum and the listing is done once that offset
        passes ``total-results``. Lists without that metadata (``/types``)
        are a single, final page.

        Raises:
            MalformedResponseError: if *message* is not an object.
        """
        if not isinstance(message, dict):
            raise MalformedResponseError(
                f"CrossRef list response has no message object: {message!r}", url
            )

        message = dict(message)
        objects = message.pop("items", None) or []
        next_options = QueryOptions.coerce(options)

        per_page = message.get("items-per-page")
        page_query = message.get("query")
        if per_page and isinstance(page_query, dict) and "start-index" in page_query:
            next_offset = page_query["start-index"] + per_page
            total = message.get("total-results")
            is_done = total is not None and next_offset > total
            next_options.offset(next_offset)
            log.debug(
                "Page at %s: next offset %s of %s",
                page_query["start-index"],
                next_offset,
                total,
            )
        else:
            is_done = True

        return cls(
            objects=objects,
            next_options=next_options,
            is_done=is_done,
            message=message,
        )

    def __iter__(self) -> Iterator[Any]:
        return iter((self.objects, self.next_options, self.is_done, self.message))
