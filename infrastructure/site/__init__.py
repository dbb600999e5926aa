"""Site-level collaborators: URL matching and option access."""

from infrastructure.site.matcher import HostURLMatcher
from infrastructure.site.options import StaticSiteOptions

__all__ = [
    "HostURLMatcher",
    "StaticSiteOptions",
]
