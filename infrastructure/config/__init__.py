"""
Configuration management: models, loading, and validation.

Handles:
- SiteConfig: home URL, category base, root section
- StoreConfig: term store backend selection
- Term file loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_site_config, load_terms
from infrastructure.config.models import SiteConfig, StoreBackend, StoreConfig

__all__ = [
    # Main config (most commonly used)
    "SiteConfig",
    "load_site_config",
    # Store
    "StoreBackend",
    "StoreConfig",
    # Loaders
    "load_terms",
]
