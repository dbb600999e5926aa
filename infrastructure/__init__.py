"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Term stores (in-memory, YAML file)
- Configuration loading (YAML, environment)
- Site URL matching and options
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import SiteConfig, StoreBackend, load_site_config
from infrastructure.site import HostURLMatcher, StaticSiteOptions
from infrastructure.terms import SafeTermLookup, make_term_store

__all__ = [
    # Term stores (most commonly used)
    "make_term_store",
    "SafeTermLookup",
    # Site collaborators
    "HostURLMatcher",
    "StaticSiteOptions",
    # Configuration (most commonly used)
    "load_site_config",
    "SiteConfig",
    "StoreBackend",
]
