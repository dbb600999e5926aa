"""
Domain layer: URL-to-term resolution with no I/O.

Contains:
- schemas: Pydantic models for terms and content references
- taxonomy: path segmenting, hierarchy resolution, and the resolver entry points
"""

from domain.schemas import ContentRef, Term

__all__ = [
    "Term",
    "ContentRef",
]
