"""
Environment-driven config loader for the favicon crawler.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from favicon_crawler.config.models import CrawlerSettings
from favicon_crawler.constants import (
    HEADER_ACCEPT,
    HEADER_ACCEPT_LANGUAGE,
    HEADER_USER_AGENT,
)

_ENV_PREFIX = "FAVICON_CRAWLER_"


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def load_env_files(root: Path | None = None) -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = root or _project_root()
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def _get_optional_str_env(name: str) -> str | None:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped if stripped else None


def build_crawler_settings() -> CrawlerSettings:
    """
    Build settings from the current environment without caching.
    """

    return CrawlerSettings(
        input_path=_get_optional_str_env("INPUT"),
        output_path=_get_str_env("OUTPUT", "output.csv"),
        retries=max(0, _get_int_env("RETRIES", 0)),
        timeout_seconds=max(0.1, _get_float_env("TIMEOUT_SECONDS", 3.0)),
        workers=max(1, _get_int_env("WORKERS", 10)),
        user_agent=_get_str_env("USER_AGENT", HEADER_USER_AGENT),
        accept=_get_str_env("ACCEPT", HEADER_ACCEPT),
        accept_language=_get_str_env("ACCEPT_LANGUAGE", HEADER_ACCEPT_LANGUAGE),
        dom_only=_get_bool_env("DOM_ONLY", False),
        log_attempt_failures=_get_bool_env("LOG_ATTEMPT_FAILURES", False),
    )


@lru_cache(maxsize=1)
def get_crawler_settings() -> CrawlerSettings:
    """
    Return cached crawler settings from environment variables.
    """

    load_env_files()
    return build_crawler_settings()
