"""Lookup shim that turns backend failures into not-found."""

import logging

from domain.schemas import Term
from domain.taxonomy.ports import TermLookup

logger = logging.getLogger(__name__)


class SafeTermLookup(TermLookup):
    """
    Wrap a TermLookup so that every backend error reads as "no such term".

    Non-positive ids and empty slugs are answered without touching the backend.
    """

    def __init__(self, inner: TermLookup) -> None:
        self.inner = inner

    def find_term_by_id(self, term_id: int) -> Term | None:
        if term_id <= 0:
            return None
        try:
            return self.inner.find_term_by_id(term_id)
        except Exception as e:
            logger.warning("Term lookup by id=%d failed; treating as not found: %s", term_id, e)
            return None

    def find_term_by_slug(self, slug: str) -> Term | None:
        if not slug:
            return None
        try:
            return self.inner.find_term_by_slug(slug)
        except Exception as e:
            logger.warning("Term lookup by slug=%r failed; treating as not found: %s", slug, e)
            return None
