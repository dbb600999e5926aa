"""SiteOptions backed by a SiteConfig."""

from domain.taxonomy.ports import SiteOptions
from infrastructure.config.models import SiteConfig


class StaticSiteOptions(SiteOptions):
    def __init__(self, cfg: SiteConfig) -> None:
        self.cfg = cfg

    def home_path(self) -> str:
        return self.cfg.home_path

    def category_base_option(self) -> str:
        return self.cfg.category_base
