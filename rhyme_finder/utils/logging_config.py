"""Process-wide logging setup for the word finder front-ends."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# httpx logs every request line at INFO; only show those when debugging.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")

_configured_level: Optional[int] = None


def resolve_level(level: str | int | None, default: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``logging.DEBUG`` into a level number."""

    if level is None or (isinstance(level, str) and not level.strip()):
        return default
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        resolved = logging.getLevelName(str(level).strip().upper())
        return resolved if isinstance(resolved, int) else default


def configure_logging(level: str | int | None = None, *, force: bool = False) -> int:
    """Install the root handler once and return the active level.

    Both the Gradio entry point and the Streamlit script pass
    ``Settings.log_level`` here. Streamlit re-runs its script on every
    interaction, so later calls keep the first configuration unless ``force``
    is set.
    """

    global _configured_level

    if _configured_level is not None and not force:
        return _configured_level

    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=force)
    logging.getLogger("rhyme_finder").setLevel(resolved)

    transport_level = resolved if resolved <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    _configured_level = resolved
    return resolved


__all__ = ["LOG_FORMAT", "configure_logging", "resolve_level"]
