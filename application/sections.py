"""Root section lookups built on the configured root section id."""

from application.constants import NO_ROOT_PARENT
from domain.taxonomy.ports import TermLookup
from infrastructure.config.models import SiteConfig


def root_section_id(cfg: SiteConfig) -> int:
    """Configured root section id; 0 when none is set."""
    return int(cfg.root_section_id)


def root_parent_id(cfg: SiteConfig, lookup: TermLookup) -> int:
    """
    Parent id of the configured root section.

    Returns -1 when no root is configured, the root term cannot be found,
    or the root has no parent.
    """
    root_id = root_section_id(cfg)
    if root_id <= 0:
        return NO_ROOT_PARENT

    root = lookup.find_term_by_id(root_id)
    if root is None or root.parent <= 0:
        return NO_ROOT_PARENT

    return root.parent
