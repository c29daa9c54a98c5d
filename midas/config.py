"""
midas/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


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
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class MidasSettings:
    """
    Runtime settings for the API and the frontend.
    """

    log_level: str = "INFO"
    recent_products_limit: int = 3
    api_base_url: str = "http://127.0.0.1:8000"
    api_timeout_seconds: float = 10.0


@lru_cache(maxsize=1)
def get_midas_settings() -> MidasSettings:
    """
    Return cached settings from environment variables.
    """

    return MidasSettings(
        log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
        recent_products_limit=max(1, _get_int_env("MIDAS_RECENT_PRODUCTS_LIMIT", 3)),
        api_base_url=_get_str_env("MIDAS_API_BASE_URL", "http://127.0.0.1:8000").rstrip("/"),
        api_timeout_seconds=max(1.0, _get_float_env("MIDAS_API_TIMEOUT_SECONDS", 10.0)),
    )
