"""Environment-driven settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _path(name: str) -> Path | None:
    raw = (os.getenv(name) or "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    allow_lists_path: Path | None = None
    log_level: str = "INFO"
    timezone: str = "Asia/Kolkata"


def get_settings() -> Settings:
    """Load settings from the environment (and a .env file when present)."""
    load_dotenv()
    return Settings(
        allow_lists_path=_path("RICKSHAW_ALLOW_LISTS"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        timezone=(os.getenv("RICKSHAW_TIMEZONE") or "Asia/Kolkata").strip(),
    )


def active_allow_lists(settings: Settings | None = None):
    """Return the allow-lists for this deployment.

    Uses the YAML file named by ``RICKSHAW_ALLOW_LISTS`` when set, otherwise
    the built-in Mumbai lists.
    """
    from rickshaw_watch.scoring.matchers import AllowLists, load_allow_lists

    settings = settings or get_settings()
    if settings.allow_lists_path is None:
        return AllowLists()
    return load_allow_lists(settings.allow_lists_path)
