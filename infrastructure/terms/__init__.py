"""
Term store adapters.

Implements the TermLookup interface for different backends:
- memory (terms supplied in code)
- file (terms loaded from a YAML file)

SafeTermLookup wraps any of them so backend errors read as "not found".
"""

from infrastructure.terms.factory import make_term_store
from infrastructure.terms.file import FileTermStore
from infrastructure.terms.memory import InMemoryTermStore
from infrastructure.terms.registry import register_store
from infrastructure.terms.safe import SafeTermLookup

__all__ = [
    # Concrete implementations
    "InMemoryTermStore",
    "FileTermStore",
    "SafeTermLookup",
    # Factory (most commonly used)
    "make_term_store",
    "register_store",
]
