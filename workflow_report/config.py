"""Environment-driven settings for the workflow report."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from . import __version__
from .services.github_errors import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = f"workflow-report/{__version__}"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    # None leaves the transport default in place.
    timeout: float | None = None
    log_level: int = logging.WARNING


def _get_env(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"WORKFLOW_REPORT_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError(f"WORKFLOW_REPORT_TIMEOUT must be positive, got {raw!r}")
    return timeout


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown WORKFLOW_REPORT_LOG_LEVEL: {raw}")
    return level


def load_settings() -> Settings:
    """Build settings from the process environment."""
    return Settings(
        api_url=_get_env("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
        user_agent=_get_env("WORKFLOW_REPORT_USER_AGENT", DEFAULT_USER_AGENT),
        timeout=_parse_timeout(os.getenv("WORKFLOW_REPORT_TIMEOUT")),
        log_level=_parse_log_level(_get_env("WORKFLOW_REPORT_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
