"""URL entry points: resolve a category term from a path or a query string."""

import re
from urllib.parse import parse_qs, urlsplit

from domain.schemas import Term
from domain.taxonomy.hierarchy import HierarchyResolver
from domain.taxonomy.ports import SiteOptions, SiteURLMatcher, TermLookup
from domain.taxonomy.segments import (
    category_base_segments,
    decode_segment,
    sanitize_text,
    segments_for,
    split_segments,
    strip_prefix,
    url_path,
)

CAT_PARAM = "cat"
CATEGORY_NAME_PARAM = "category_name"

# Ids saturate at the largest signed 64-bit value
MAX_TERM_ID = 2**63 - 1

_ASCII_WHITESPACE = " \t\n\r\v\f"
_LEADING_NUMBER_RE = re.compile(r"^[ \t\n\r\v\f]*[+-]?(\d+)(\.\d*)?([eE][+-]?\d+)?")


def _absint(value: str) -> int:
    """
    Leading number of ``value`` as a non-negative int (0 if there is none).

    Only ASCII whitespace may precede the number. Decimal and exponent forms
    such as ``1e3`` are truncated toward zero. Results saturate at MAX_TERM_ID.
    """
    m = _LEADING_NUMBER_RE.match(value)
    if not m:
        return 0

    if m.group(2) is None and m.group(3) is None:
        digits = m.group(1).lstrip("0")
        if len(digits) > len(str(MAX_TERM_ID)):
            return MAX_TERM_ID
        return min(int(digits or "0"), MAX_TERM_ID)

    number = abs(float(m.group(0).strip(_ASCII_WHITESPACE)))
    if number >= MAX_TERM_ID:
        return MAX_TERM_ID
    return int(number)


def _is_empty(value: str | None) -> bool:
    # "0" counts as empty for query flags
    return value is None or value == "" or value == "0"


def parse_query(url: str) -> dict[str, str]:
    """Query parameters of ``url``; the last occurrence of a repeated key wins."""
    try:
        query = urlsplit(url).query
    except ValueError:
        return {}
    params = parse_qs(query, keep_blank_values=True)
    return {key: values[-1] for key, values in params.items() if values}


class TermResolver:
    """
    Resolve an absolute URL into a category term.

    Both entry points are pure functions of the URL and the injected
    collaborators: nothing is cached and no state is mutated between calls.
    """

    def __init__(
        self,
        *,
        lookup: TermLookup,
        options: SiteOptions,
        url_matcher: SiteURLMatcher,
    ) -> None:
        self.lookup = lookup
        self.options = options
        self.url_matcher = url_matcher
        self.hierarchy = HierarchyResolver(lookup)

    def resolve_by_path(self, url: str) -> Term | None:
        """Resolve from the URL path, e.g. ``/category/news/politics/``."""
        if not self.url_matcher(url):
            return None

        raw_path = url_path(url)
        if not isinstance(raw_path, str) or raw_path in ("", "/"):
            return None

        segments = segments_for(url, self.options.home_path())
        segments = strip_prefix(segments, category_base_segments(self.options.category_base_option()))
        return self.hierarchy.resolve(segments)

    def resolve_by_query(self, url: str) -> Term | None:
        """
        Resolve from ``?cat=<id>`` or ``?category_name=<slug path>``.

        A positive ``cat`` id that exists wins outright; otherwise
        ``category_name`` is still tried.
        """
        if not self.url_matcher(url):
            return None

        params = parse_query(url)

        cat = params.get(CAT_PARAM)
        if not _is_empty(cat):
            cat_id = _absint(cat)
            if cat_id > 0:
                term = self.lookup.find_term_by_id(cat_id)
                if term is not None:
                    return term

        category_name = params.get(CATEGORY_NAME_PARAM)
        if not _is_empty(category_name):
            cleaned = decode_segment(sanitize_text(category_name))
            return self.hierarchy.resolve(split_segments(cleaned))

        return None
