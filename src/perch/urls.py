"""URL helpers for active-state matching.

Splits a URL into the two components menus compare, host and path,
and normalizes root paths. Pure functions, no I/O.

Usage::

    from perch.urls import parts, strip_trailing_separators

    parts("https://example.com/about?tab=1")
    # UrlParts(host='example.com', path='/about')

    strip_trailing_separators("/en/")  # "/en"
"""

from dataclasses import dataclass
from urllib.parse import urlsplit


@dataclass(frozen=True, slots=True)
class UrlParts:
    """Host and path of a URL. Either may be empty."""

    host: str = ""
    path: str = ""


def parts(url: str) -> UrlParts:
    """Split *url* into host and path.

    Relative and path-only URLs have an empty host. Query strings and
    fragments are dropped. Hosts are lowercased, paths are kept as-is.
    Malformed URLs (e.g. an unterminated IPv6 host) yield empty parts
    instead of raising::

        >>> parts("/about/team")
        UrlParts(host='', path='/about/team')
        >>> parts("//cdn.example.com/x")
        UrlParts(host='cdn.example.com', path='/x')
        >>> parts("http://[::1")
        UrlParts(host='', path='')
    """
    try:
        split = urlsplit(url)
    except ValueError:
        return UrlParts()
    return UrlParts(host=split.hostname or "", path=split.path)


def strip_trailing_separators(path: str, sep: str = "/") -> str:
    """Remove trailing *sep* from *path*.

    A path made only of separators collapses to a single *sep*, so the
    site root stays ``"/"`` rather than becoming the empty string::

        >>> strip_trailing_separators("/en//")
        '/en'
        >>> strip_trailing_separators("///")
        '/'
    """
    if not path or not sep:
        return path
    while path.endswith(sep) and path != sep:
        path = path[: -len(sep)]
    return path
