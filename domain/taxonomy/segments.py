"""Path segmenting, prefix stripping, and query value cleanup."""

import re
from collections.abc import Sequence
from urllib.parse import unquote_plus, urlsplit

DEFAULT_CATEGORY_BASE = "category"

_TAG_RE = re.compile(r"<[^>]*>")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"[\r\n\t ]+")


def split_segments(value: str) -> list[str]:
    """Trim ``/`` from both ends and split into non-empty segments."""
    trimmed = value.strip("/")
    if not trimmed:
        return []
    return [seg for seg in trimmed.split("/") if seg]


def url_path(url: str) -> str | None:
    """Return the path component of a URL, or None if the URL cannot be parsed."""
    try:
        return urlsplit(url).path
    except ValueError:
        return None


def segments_for(url: str, home_path: str | None) -> list[str]:
    """
    Split a URL's path into segments, minus the site's home path prefix.

    The home path is removed only when it is known, not ``"/"``, and a literal
    prefix of the URL path. Malformed input yields an empty list.
    """
    path = url_path(url)
    if not isinstance(path, str) or path == "":
        return []

    if isinstance(home_path, str) and home_path not in ("", "/") and path.startswith(home_path):
        path = path[len(home_path) :]

    return split_segments(path)


def strip_prefix(segments: Sequence[str], prefix: Sequence[str]) -> list[str]:
    """
    Drop ``prefix`` from the front of ``segments`` on an exact, complete match.

    A partial match leaves ``segments`` untouched.
    """
    n = len(prefix)
    if n == 0 or len(segments) < n:
        return list(segments)

    for seg, expected in zip(segments, prefix):
        if seg != expected:
            return list(segments)

    return list(segments[n:])


def category_base_segments(category_base: str | None) -> list[str]:
    """Segments of the configured category base; empty/None means the default base."""
    base = str(category_base or "")
    if base == "":
        base = DEFAULT_CATEGORY_BASE
    return split_segments(base)


def sanitize_text(value: str) -> str:
    """
    Reduce an untrusted query value to single-line plain text.

    Tags are removed, percent-encoded octets dropped, and whitespace runs
    collapsed to a single space.
    """
    text = _TAG_RE.sub("", value)
    while _OCTET_RE.search(text):
        text = _OCTET_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def decode_segment(segment: str) -> str:
    return unquote_plus(segment)
