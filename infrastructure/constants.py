from pathlib import Path

# Repo-root conventional directories/files (overrideable via site.yaml / env)
CONFIG_DIR = Path("configs")
SITE_FILE = CONFIG_DIR / "site.yaml"
TERMS_FILE = CONFIG_DIR / "terms.yaml"

# Environment overrides, applied after .env is loaded
ENV_PREFIX = "TERM_RESOLVER_"
ENV_HOME_URL = f"{ENV_PREFIX}HOME_URL"
ENV_CATEGORY_BASE = f"{ENV_PREFIX}CATEGORY_BASE"
ENV_ROOT_SECTION_ID = f"{ENV_PREFIX}ROOT_SECTION_ID"
ENV_TERMS_FILE = f"{ENV_PREFIX}TERMS_FILE"
