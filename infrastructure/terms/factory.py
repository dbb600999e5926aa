"""Factory for creating term stores."""

import logging

from domain.taxonomy.ports import TermLookup
from infrastructure.config.models import SiteConfig

from .registry import get_store_class

logger = logging.getLogger(__name__)


def make_term_store(cfg: SiteConfig) -> TermLookup:
    """
    Create the term store registered for cfg.store.backend.

    Backends register themselves when infrastructure.terms is imported;
    register_store(..., override=True) swaps one out.

    Raises:
        RuntimeError: If no store is registered for the backend.
    """
    backend = cfg.store.backend
    store_cls = get_store_class(backend)

    if store_cls is None:
        raise RuntimeError(
            f"No term store registered for backend '{backend.value}'. "
            f"Call register_store(StoreBackend.{backend.name}, ...) first."
        )

    logger.debug("Creating term store (backend=%s, class=%s)", backend.value, store_cls.__name__)
    return store_cls.from_cfg(cfg)  # type: ignore[attr-defined]
