from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_from_env(raw: str | None = None) -> int:
    """Resolve ``VOJKER_LOG_LEVEL`` (or ``LOG_LEVEL``) to a logging level.

    A comma list such as ``"INFO,DEBUG"`` uses its last entry. Unknown names
    resolve to INFO.
    """
    if raw is None:
        raw = os.getenv("VOJKER_LOG_LEVEL") or os.getenv("LOG_LEVEL") or ""
    names = [part.strip().upper() for part in raw.split(",") if part.strip()]
    level = logging.getLevelName(names[-1]) if names else None
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr, so stdout stays reserved for report lines."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level_from_env())
    return logger
