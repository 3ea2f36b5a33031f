"""Attach a built criteria query string to a request URL."""

from __future__ import annotations

from typing import Protocol
from urllib.parse import urlsplit, urlunsplit


class _Buildable(Protocol):
    def build(self) -> str: ...


def append_to_url(url: str, criteria: _Buildable | str) -> str:
    """
    Return *url* with the criteria query appended.

    Existing query parameters and fragments are preserved; an empty
    criteria leaves *url* untouched.
    """
    query = criteria if isinstance(criteria, str) else criteria.build()
    if not query:
        return url
    parts = urlsplit(url)
    joined = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit(parts._replace(query=joined))
