"""Resolver wiring and URL resolution use cases."""

import logging
from collections.abc import Iterable

from application.constants import MODE_AUTO, MODE_PATH, MODE_QUERY, RESOLVE_MODES
from domain.schemas import ContentRef, Term
from domain.taxonomy.ports import TermLookup
from domain.taxonomy.resolver import TermResolver
from infrastructure.config.models import SiteConfig
from infrastructure.observability import clear_item_context, set_log_context
from infrastructure.site import HostURLMatcher, StaticSiteOptions
from infrastructure.terms import SafeTermLookup, make_term_store

logger = logging.getLogger(__name__)


def build_resolver(cfg: SiteConfig, store: TermLookup | None = None) -> TermResolver:
    """
    Wire a TermResolver from configuration.

    Args:
        cfg: Site configuration
        store: Optional term store; built from cfg.store when omitted

    Returns:
        TermResolver whose lookups never raise
    """
    if store is None:
        store = make_term_store(cfg)

    return TermResolver(
        lookup=SafeTermLookup(store),
        options=StaticSiteOptions(cfg),
        url_matcher=HostURLMatcher(cfg.home_url),
    )


def resolve_term(resolver: TermResolver, url: str, *, mode: str = MODE_AUTO) -> Term | None:
    """Resolve by path, by query, or path-then-query (``auto``)."""
    if mode not in RESOLVE_MODES:
        raise ValueError(f"Unknown resolve mode {mode!r}; expected one of {list(RESOLVE_MODES)}")

    if mode in (MODE_AUTO, MODE_PATH):
        term = resolver.resolve_by_path(url)
        if term is not None or mode == MODE_PATH:
            return term

    return resolver.resolve_by_query(url)


def resolve_section_url(resolver: TermResolver, url: str, *, mode: str = MODE_AUTO) -> ContentRef | None:
    """Map an incoming URL to the section it addresses, or None."""
    term = resolve_term(resolver, url, mode=mode)
    if term is None:
        return None
    return ContentRef(content_type="section", id=term.id)


def resolve_urls(
    resolver: TermResolver,
    urls: Iterable[str],
    *,
    mode: str = MODE_AUTO,
) -> list[tuple[str, ContentRef | None]]:
    """
    Resolve many URLs in order, logging each outcome.

    Returns:
        (url, ContentRef or None) pairs, one per input URL
    """
    results: list[tuple[str, ContentRef | None]] = []
    for i, url in enumerate(urls, start=1):
        set_log_context(item=i)
        ref = resolve_section_url(resolver, url, mode=mode)
        if ref is None:
            logger.info("No section for %s", url)
        else:
            logger.info("Resolved %s -> %s %d", url, ref.content_type, ref.id)
        results.append((url, ref))
    clear_item_context()

    resolved = sum(1 for _, ref in results if ref is not None)
    logger.info("Resolved %d/%d URLs (mode=%s)", resolved, len(results), mode)
    return results
