"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator, model_validator

from domain.taxonomy.segments import DEFAULT_CATEGORY_BASE


class StoreBackend(str, Enum):
    """Supported term store backends."""

    MEMORY = "memory"
    FILE = "file"


class StoreConfig(BaseModel):
    """Where terms are read from."""

    backend: StoreBackend = StoreBackend.FILE
    terms_file: Path | None = Field(
        default=None,
        description="YAML file with a top-level `terms` list. Required for the file backend.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "StoreConfig":
        if self.backend is StoreBackend.FILE and self.terms_file is None:
            raise ValueError("store.terms_file is required when store.backend='file'")
        return self


class SiteConfig(BaseModel):
    """
    Site-wide settings for URL resolution.
    - Loaded from site.yaml
    - Overridden by TERM_RESOLVER_* environment variables
    - Consumed by the resolver wiring in application.resolution
    """

    home_url: str = Field(..., description="Absolute URL the site is served from, e.g. https://example.com/blog")
    category_base: str = Field(
        default=DEFAULT_CATEGORY_BASE,
        description="Path segments expected before category slugs. Empty means the default.",
    )
    root_section_id: int = Field(
        default=0,
        ge=0,
        description="Term id of the configured root section; 0 when not configured.",
    )
    store: StoreConfig = Field(default_factory=lambda: StoreConfig(backend=StoreBackend.MEMORY))

    @field_validator("home_url")
    @classmethod
    def _check_home_url(cls, v: str) -> str:
        v = v.strip()
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"home_url must be an absolute http(s) URL, got {v!r}")
        return v

    @field_validator("category_base")
    @classmethod
    def _default_category_base(cls, v: str) -> str:
        # Preserve default behavior for a blank option
        return v if v.strip() else DEFAULT_CATEGORY_BASE

    @property
    def home_path(self) -> str:
        return urlsplit(self.home_url).path or "/"
