"""Parse a term forest from a pre-loaded YAML dict."""

from typing import Any

from pydantic import ValidationError

from domain.schemas import Term


def parse_terms_config(data: dict[str, Any]) -> list[Term]:
    """
    Parse pre-loaded YAML dict into a list of Term objects.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected shape::

        terms:
          - {id: 1, slug: news}
          - {id: 2, slug: politics, parent: 1}

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        Terms in file order

    Raises:
        ValueError: If `terms` is not a list, an entry is invalid, or an id repeats
    """
    raw_terms = data.get("terms", []) or []
    if not isinstance(raw_terms, list):
        raise ValueError("terms must be a list")

    terms: list[Term] = []
    seen: set[int] = set()
    for i, entry in enumerate(raw_terms):
        if not isinstance(entry, dict):
            raise ValueError(f"terms[{i}] must be a mapping, got {type(entry).__name__}")
        try:
            term = Term(**entry)
        except ValidationError as e:
            raise ValueError(f"Invalid term at terms[{i}]: {e}") from e
        if term.id in seen:
            raise ValueError(f"Duplicate term id {term.id} at terms[{i}]")
        seen.add(term.id)
        terms.append(term)

    return terms
