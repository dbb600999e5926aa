"""
CLI entrypoint for resolving URLs into category sections.

This script performs the following steps:
- loads .env (if present) and configs/site.yaml
- builds the term store and resolver from the site config
- resolves each URL by path and/or query string
- prints one JSON object per URL to stdout
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import build_resolver, resolve_urls
from application.constants import (
    CONTENT_TYPE_KEY,
    ID_KEY,
    LOG_FILENAME,
    MODE_AUTO,
    OUTPUT_ROOT,
    RESOLVE_MODES,
    URL_KEY,
)
from infrastructure.config import load_site_config
from infrastructure.constants import SITE_FILE
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve URLs to category sections")
    p.add_argument("urls", nargs="+", help="Absolute URLs to resolve")
    p.add_argument(
        "--config",
        type=str,
        default=str(SITE_FILE),
        help="Path to site.yaml (default: configs/site.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, skipped if missing)",
    )
    p.add_argument(
        "--mode",
        type=str,
        default=MODE_AUTO,
        choices=list(RESOLVE_MODES),
        help="Resolve by path, by query string, or path then query (default: auto)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--log-file",
        action="store_true",
        help=f"Also write a DEBUG log to {OUTPUT_ROOT}/<run_id>/{LOG_FILENAME}",
    )
    return p.parse_args()


def main() -> int:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = OUTPUT_ROOT / run_id / LOG_FILENAME if args.log_file else None
    configure_logging(log_file=log_path, console_level=getattr(logging, args.console_level))
    set_log_context(run_id_full=run_id)
    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))

    # Missing default config is fine when the environment supplies the settings
    config_path: Path | None = Path(args.config)
    if not config_path.exists() and args.config == str(SITE_FILE):
        logger.info("No %s found; using environment settings only", config_path)
        config_path = None

    cfg = load_site_config(config_path)
    resolver = build_resolver(cfg)

    results = resolve_urls(resolver, args.urls, mode=args.mode)
    for url, ref in results:
        row = {
            URL_KEY: url,
            CONTENT_TYPE_KEY: ref.content_type if ref is not None else None,
            ID_KEY: ref.id if ref is not None else None,
        }
        print(json.dumps(row, ensure_ascii=False))

    return 0 if all(ref is not None for _, ref in results) else 1


if __name__ == "__main__":
    sys.exit(main())
