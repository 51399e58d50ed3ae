"""Runtime settings read from ``RHYME_FINDER_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..utils.logging_config import resolve_level

DEFAULT_API_URL = "https://api.datamuse.com"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _env_int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _env_flag(env: Mapping[str, str], key: str) -> bool:
    return str(env.get(key, "")).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Configuration for the word service client and the web front-end."""

    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    max_results: Optional[int] = None
    share: bool = False
    host: str = "0.0.0.0"
    port: int = 7860
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``env`` (defaults to :data:`os.environ`).

        Unparseable or non-positive numbers fall back to the defaults.
        """

        env = os.environ if env is None else env
        defaults = cls()
        api_url = str(env.get("RHYME_FINDER_API_URL", "") or "").strip()
        host = str(env.get("RHYME_FINDER_HOST", "") or "").strip()
        return cls(
            api_url=api_url.rstrip("/") or defaults.api_url,
            timeout=_env_float(env, "RHYME_FINDER_TIMEOUT", defaults.timeout),
            max_results=_env_int(env, "RHYME_FINDER_MAX_RESULTS", defaults.max_results),
            share=_env_flag(env, "RHYME_FINDER_SHARE"),
            host=host or defaults.host,
            port=_env_int(env, "RHYME_FINDER_PORT", defaults.port) or defaults.port,
            log_level=resolve_level(
                env.get("RHYME_FINDER_LOG_LEVEL"), default=defaults.log_level
            ),
        )


__all__ = ["DEFAULT_API_URL", "Settings"]
