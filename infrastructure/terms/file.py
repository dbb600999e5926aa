"""YAML file term store."""

import logging
from pathlib import Path

from infrastructure.config.loader import load_terms
from infrastructure.config.models import SiteConfig, StoreBackend
from infrastructure.terms.memory import InMemoryTermStore
from infrastructure.terms.registry import register_store

logger = logging.getLogger(__name__)


class FileTermStore(InMemoryTermStore):
    """Loads the whole taxonomy from a YAML file once, then answers from memory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(load_terms(path))
        logger.info("Loaded %d terms from %s", len(self), path)

    @classmethod
    def from_cfg(cls, cfg: SiteConfig) -> "FileTermStore":
        if cfg.store.terms_file is None:
            raise ValueError("store.terms_file is required for the file backend")
        return cls(cfg.store.terms_file)


register_store(StoreBackend.FILE, FileTermStore)
