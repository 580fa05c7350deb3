from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os

BROWSER_ENV = "GITTOWN_BROWSER"
LOG_LEVEL_ENV = "GITTOWN_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"

LOG_LEVELS = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "warning"


@dataclass(frozen=True)
class Settings:
    browser: str | None = None
    color: bool | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def parse_log_level(value: str, source: str = LOG_LEVEL_ENV) -> str:
    level = value.strip().lower()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"{source} must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        )
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    browser = env.get(BROWSER_ENV, "").strip() or None
    # None leaves the decision to the terminal check
    color = False if env.get(NO_COLOR_ENV) else None
    raw_level = env.get(LOG_LEVEL_ENV, "")
    log_level = parse_log_level(raw_level) if raw_level.strip() else DEFAULT_LOG_LEVEL
    return Settings(browser=browser, color=color, log_level=log_level)
