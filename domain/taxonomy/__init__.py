"""
Category taxonomy resolution.

Turns an absolute URL into the taxonomy term it addresses. All functions in
this package are pure (no file I/O); collaborators are injected through the
interfaces in ``ports``.
"""

from domain.taxonomy.hierarchy import HierarchyResolver
from domain.taxonomy.loader import parse_terms_config
from domain.taxonomy.ports import SiteOptions, SiteURLMatcher, TermLookup
from domain.taxonomy.resolver import TermResolver
from domain.taxonomy.segments import category_base_segments, segments_for, strip_prefix

__all__ = [
    "TermResolver",
    "HierarchyResolver",
    "TermLookup",
    "SiteOptions",
    "SiteURLMatcher",
    "segments_for",
    "strip_prefix",
    "category_base_segments",
    "parse_terms_config",
]
