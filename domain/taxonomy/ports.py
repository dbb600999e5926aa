"""Collaborator interfaces consumed by the resolver."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from domain.schemas import Term

# url -> True iff the URL belongs to the site being served
SiteURLMatcher = Callable[[str], bool]


class TermLookup(ABC):
    """
    Read-only access to the category taxonomy.

    Implementations must return None both for absent terms and for backend
    failures; callers never distinguish the two.
    """

    @abstractmethod
    def find_term_by_id(self, term_id: int) -> Term | None:
        raise NotImplementedError

    @abstractmethod
    def find_term_by_slug(self, slug: str) -> Term | None:
        raise NotImplementedError


class SiteOptions(ABC):
    """Site-wide settings read on every resolution call."""

    @abstractmethod
    def home_path(self) -> str:
        """Path prefix the site is mounted under (``"/"`` at the domain root)."""
        raise NotImplementedError

    @abstractmethod
    def category_base_option(self) -> str:
        """Configured base path for category URLs (``"category"`` by default)."""
        raise NotImplementedError
