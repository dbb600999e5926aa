"""Two-level parent/child resolution of slug sequences."""

from collections.abc import Sequence

from domain.schemas import Term
from domain.taxonomy.ports import TermLookup
from domain.taxonomy.segments import decode_segment


class HierarchyResolver:
    """
    Decide which single term an ordered slug sequence addresses.

    Only the last two segments are consulted. A child is returned when its
    actual parent's slug matches the segment before it; otherwise the
    second-to-last segment is looked up on its own.
    """

    def __init__(self, lookup: TermLookup) -> None:
        self.lookup = lookup

    def resolve(self, segments: Sequence[str]) -> Term | None:
        if len(segments) >= 2:
            parent_slug = segments[-2]
            child_slug = segments[-1]

            verified = self._verified_child(parent_slug, child_slug)
            if verified is not None:
                return verified

            return self._parent_only(parent_slug)

        if len(segments) == 1:
            return self.lookup_slug(str(segments[0]))

        return None

    def lookup_slug(self, slug: str) -> Term | None:
        decoded = decode_segment(slug)
        if decoded == "":
            return None
        return self.lookup.find_term_by_slug(decoded)

    def _verified_child(self, parent_slug: str, child_slug: str) -> Term | None:
        """Child term, but only if its real parent carries ``parent_slug``."""
        child = self.lookup_slug(child_slug)
        if child is None or child.parent <= 0:
            return None

        actual_parent = self.lookup.find_term_by_id(child.parent)
        if actual_parent is not None and actual_parent.slug == decode_segment(parent_slug):
            return child
        return None

    def _parent_only(self, parent_slug: str) -> Term | None:
        # The child segment is ignored entirely here
        return self.lookup_slug(parent_slug)
