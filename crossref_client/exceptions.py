"""Exceptions raised by crossref_client.

Every failed call raises exactly one of these, from the call that issued the
request. Catch ``CrossRefError`` to handle all of them.
"""

from typing import Optional


class CrossRefError(Exception):
    """Base class for all errors raised while talking to CrossRef."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(CrossRefError):
    """No response was obtained (connection error, timeout, ...).

    The underlying ``requests`` exception is available as ``__cause__``.
    """


class NotFoundError(CrossRefError):
    """CrossRef answered 404 for the resolved URL."""


class UpstreamError(CrossRefError):
    """CrossRef answered with an error.

    Either the HTTP status was an error other than 404 (``status_code`` is
    set) or the envelope ``status`` was not ``"ok"`` (``status`` is set).
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        status: Optional[str] = None,
    ) -> None:
        super().__init__(message, url)
        self.status_code = status_code
        self.status = status


class MalformedResponseError(CrossRefError):
    """The response body was not a CrossRef envelope."""
