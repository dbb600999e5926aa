"""Configuration loading from YAML files and environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import Term
from domain.taxonomy.loader import parse_terms_config
from infrastructure.config.models import SiteConfig
from infrastructure.constants import (
    ENV_CATEGORY_BASE,
    ENV_HOME_URL,
    ENV_ROOT_SECTION_ID,
    ENV_TERMS_FILE,
)

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_terms(path: Path) -> list[Term]:
    """
    Load taxonomy terms from YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    terms = parse_terms_config(data)
    logger.debug("Loaded %d terms from %s", len(terms), path)
    return terms


def _apply_env_overrides(raw: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    out = dict(raw)

    if env.get(ENV_HOME_URL):
        out["home_url"] = env[ENV_HOME_URL]
    if ENV_CATEGORY_BASE in env:
        out["category_base"] = env[ENV_CATEGORY_BASE]
    if env.get(ENV_ROOT_SECTION_ID):
        try:
            out["root_section_id"] = int(env[ENV_ROOT_SECTION_ID])
        except ValueError as e:
            raise ValueError(
                f"{ENV_ROOT_SECTION_ID} must be an integer, got {env[ENV_ROOT_SECTION_ID]!r}"
            ) from e
    if env.get(ENV_TERMS_FILE):
        store = dict(out.get("store") or {})
        store["backend"] = "file"
        store["terms_file"] = env[ENV_TERMS_FILE]
        out["store"] = store

    return out


def load_site_config(path: Path | None, env: Mapping[str, str] | None = None) -> SiteConfig:
    """
    Load site.yaml (if given) and construct a SiteConfig.

    Environment variables (TERM_RESOLVER_*) override file values, so a missing
    file is acceptable only when `path` is None and the environment supplies
    `home_url`.

    Raises:
        FileNotFoundError: If `path` is given but does not exist
        ValueError: If the YAML is not a mapping or an override is malformed
        pydantic.ValidationError: If the merged settings are invalid
    """
    raw = _load_yaml(path) if path is not None else {}
    merged = _apply_env_overrides(raw, os.environ if env is None else env)

    if "home_url" not in merged:
        raise ValueError(f"site config missing required key: home_url (set it in YAML or {ENV_HOME_URL})")

    cfg = SiteConfig(**merged)
    logger.debug(
        "Site config loaded (home_url=%s, category_base=%s, store=%s)",
        cfg.home_url,
        cfg.category_base,
        cfg.store.backend.value,
    )
    return cfg
