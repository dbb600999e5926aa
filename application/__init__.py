"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
turning configuration into a wired resolver and resolving incoming URLs.
"""

from application.resolution import build_resolver, resolve_section_url, resolve_term, resolve_urls
from application.sections import root_parent_id, root_section_id

__all__ = [
    # Main workflows
    "build_resolver",
    "resolve_section_url",
    "resolve_term",
    "resolve_urls",
    # Root section
    "root_section_id",
    "root_parent_id",
]
