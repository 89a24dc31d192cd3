"""
titlescan/config.py

Environment-driven configuration for title scanning.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_TARGETS: tuple[str, ...] = (
    "https://www.google.com/",
    "https://www.github.com/",
    "https://www.golang.org/",
)
DEFAULT_USER_AGENT = "TitleScanBot/1.0"


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
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


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    load_env_files()


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    raw = os.getenv(name)
    if raw is None:
        return default
    stripped = raw.strip()
    return stripped if stripped else default


def _get_optional_float_env(name: str) -> float | None:
    _load_env_once()
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    _load_env_once()
    raw = os.getenv(name)
    if raw is None:
        return default
    items = tuple(item.strip() for item in raw.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class TitleScanSettings:
    """
    Runtime settings for a title scan run.

    `timeout_seconds` is None unless explicitly configured, in which case an
    unresponsive target holds the whole run until it answers.
    """

    targets: tuple[str, ...] = DEFAULT_TARGETS
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float | None = None
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_title_scan_settings() -> TitleScanSettings:
    """
    Return cached title scan settings from environment variables.
    """

    timeout_seconds = _get_optional_float_env("TITLE_SCAN_TIMEOUT_SECONDS")
    if timeout_seconds is not None and timeout_seconds <= 0:
        timeout_seconds = None

    return TitleScanSettings(
        targets=_get_list_env("TITLE_SCAN_TARGETS", DEFAULT_TARGETS),
        user_agent=_get_str_env("TITLE_SCAN_USER_AGENT", DEFAULT_USER_AGENT),
        timeout_seconds=timeout_seconds,
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
    )
