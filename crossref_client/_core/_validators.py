"""Validation helpers for CrossRef responses and call arguments."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..exceptions import MalformedResponseError, UpstreamError


def require_non_empty(mapping: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Raise ``ValueError`` if any of *keys* are missing or empty in *mapping*."""
    missing = [k for k in keys if not mapping.get(k)]
    if missing:
        raise ValueError(f"Missing required parameters: {', '.join(missing)}")


def unwrap_envelope(body: Any, url: str) -> Any:
    """Check the ``{status, message}`` envelope and return its ``message``.

    Raises:
        MalformedResponseError: if *body* is not an object, or has no status
            or no message.
        UpstreamError: if the envelope status is anything but ``"ok"``.
    """
    if not isinstance(body, dict):
        raise MalformedResponseError(f"CrossRef response was not JSON: {body!r}", url)
    if not body.get("status"):
        raise MalformedResponseError(
            "Malformed CrossRef response: no `status` field.", url
        )
    if body["status"] != "ok":
        raise UpstreamError(
            f"CrossRef error: {body['status']}", url, status=body["status"]
        )
    if "message" not in body:
        raise MalformedResponseError(
            "Malformed CrossRef response: no `message` field.", url
        )
    return body["message"]
