"""Core HTTP request wrapper used by every CrossRef endpoint."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import requests

from ..exceptions import NotFoundError, TransportError, UpstreamError
from ._validators import unwrap_envelope

log = logging.getLogger(__name__)

CROSSREF_API_URL = "http://api.crossref.org/"
DEFAULT_TIMEOUT = 60  # CrossRef is *very* slow
USER_AGENT = "crossref-client"


@dataclass(frozen=True)
class RequestConfig:
    """Read-only configuration shared by every request."""

    base_url: str = CROSSREF_API_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=dict)
    mailto: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RequestConfig":
        """Build the default configuration, picking up ``CROSSREF_MAILTO``.

        CrossRef routes requests that identify a contact address to its
        "polite" pool.
        """
        return cls(mailto=os.environ.get("CROSSREF_MAILTO") or None)

    def build_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.mailto:
            headers["User-Agent"] = f"{USER_AGENT} (mailto:{self.mailto})"
        headers.update(self.headers)
        return headers


def _error_message(resp: requests.Response) -> str:
    """Return the upstream error message if the body carries one."""
    try:
        body = resp.json()
    except ValueError:
        return resp.reason
    message = body.get("message") if isinstance(body, dict) else None
    if isinstance(message, list):
        parts = [m.get("message") for m in message if isinstance(m, dict)]
        message = "; ".join(p for p in parts if p)
    if isinstance(message, str) and message:
        return message
    return resp.reason


def request(path: str, config: Optional[RequestConfig] = None) -> Any:
    """GET *path* relative to the CrossRef base URL and unwrap the envelope.

    Exactly one request is issued; nothing is retried.

    Args:
        path: Resource path, including any query string.
        config: Request configuration; the default points at the public API.

    Returns:
        The ``message`` field of the response envelope.

    Raises:
        TransportError: if no response was obtained.
        NotFoundError: if CrossRef answered 404.
        UpstreamError: for any other HTTP error, or a non-"ok" envelope.
        MalformedResponseError: if the body is not a CrossRef envelope.
    """
    config = config or RequestConfig()
    url = f"{config.base_url}{path}"
    log.debug("GET %s", url)

    try:
        resp = requests.get(url, headers=config.build_headers(), timeout=config.timeout)
    except requests.RequestException as exc:
        raise TransportError(f"CrossRef request failed: {exc}", url) from exc

    if resp.status_code == 404:
        raise NotFoundError(f"Not found on CrossRef: '{url}'", url)
    if resp.status_code >= 400:
        raise UpstreamError(
            f"CrossRef error: [{resp.status_code}] {_error_message(resp)}",
            url,
            status_code=resp.status_code,
        )

    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    return unwrap_envelope(body, url)
