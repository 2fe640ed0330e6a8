"""Application navigation – NavigationState port and URL-backed implementation."""
from __future__ import annotations

from typing import Protocol
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

__all__ = [
    "NavigationState",
    "QueryParams",
    "UrlNavigationState",
    "delete_param",
    "replace_param",
]

#: Ordered ``(name, value)`` pairs; a name may repeat.
QueryParams = list[tuple[str, str]]


def replace_param(params: QueryParams, name: str, value: str) -> QueryParams:
    """Set *name* like ``URLSearchParams.set``.

    The first occurrence keeps its position and takes *value*, later
    occurrences are dropped, and an absent name is appended.  Other pairs,
    repeated ones included, are untouched.
    """
    out: QueryParams = []
    seen = False
    for key, current in params:
        if key != name:
            out.append((key, current))
        elif not seen:
            out.append((key, value))
            seen = True
    if not seen:
        out.append((name, value))
    return out


def delete_param(params: QueryParams, name: str) -> QueryParams:
    return [(key, value) for key, value in params if key != name]


class NavigationState(Protocol):
    """Port: the address bar's query parameters."""

    def get_param(self, name: str) -> str | None: ...
    def params(self) -> QueryParams: ...
    def push(self, params: QueryParams) -> None: ...


class UrlNavigationState:
    """Navigation state over a URL string, recording every pushed entry."""

    def __init__(self, url: str = "/") -> None:
        self._url = url
        self.history: list[str] = [url]

    @property
    def url(self) -> str:
        return self._url

    def get_param(self, name: str) -> str | None:
        for key, value in self.params():
            if key == name:
                return value
        return None

    def params(self) -> QueryParams:
        return parse_qsl(urlsplit(self._url).query, keep_blank_values=True)

    def push(self, params: QueryParams) -> None:
        parts = urlsplit(self._url)
        self._url = urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), ""))
        if not params:
            self._url += "?"
        self.history.append(self._url)
