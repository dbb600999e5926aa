"""Dict-backed term store."""

import logging
from collections.abc import Iterable

from domain.schemas import Term
from domain.taxonomy.ports import TermLookup
from infrastructure.config.models import SiteConfig, StoreBackend
from infrastructure.terms.registry import register_store

logger = logging.getLogger(__name__)


class InMemoryTermStore(TermLookup):
    """Serves lookups from terms held in memory. Later duplicates of a slug win."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._by_id: dict[int, Term] = {}
        self._by_slug: dict[str, Term] = {}
        for term in terms:
            self._by_id[term.id] = term
            self._by_slug[term.slug] = term

    @classmethod
    def from_cfg(cls, cfg: SiteConfig) -> "InMemoryTermStore":
        return cls()

    def __len__(self) -> int:
        return len(self._by_id)

    def find_term_by_id(self, term_id: int) -> Term | None:
        return self._by_id.get(term_id)

    def find_term_by_slug(self, slug: str) -> Term | None:
        return self._by_slug.get(slug)


register_store(StoreBackend.MEMORY, InMemoryTermStore)
