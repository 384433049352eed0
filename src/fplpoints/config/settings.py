"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_BASE_URL_ENV = "FPLPOINTS_BASE_URL"
_TIMEOUT_ENV = "FPLPOINTS_TIMEOUT"
_WORKERS_ENV = "FPLPOINTS_WORKERS"

DEFAULT_BASE_URL = "https://fantasy.premierleague.com/api/"
_TIMEOUT_DEFAULT = 20.0
_WORKERS_DEFAULT = 1


def _env_float(name: str, default: float, *, minimum: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number); using %.1f", name, raw, default)
        return default
    return value if minimum is None else max(minimum, value)


def _env_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", name, raw, default)
        return default
    return value if minimum is None else max(minimum, value)


def _env_url(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    return raw if raw.endswith("/") else f"{raw}/"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = _TIMEOUT_DEFAULT
    workers: int = _WORKERS_DEFAULT

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            base_url=_env_url(_BASE_URL_ENV, DEFAULT_BASE_URL),
            timeout=_env_float(_TIMEOUT_ENV, _TIMEOUT_DEFAULT, minimum=1.0),
            workers=_env_int(_WORKERS_ENV, _WORKERS_DEFAULT, minimum=1),
        )
