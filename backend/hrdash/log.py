# backend/hrdash/log.py
from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_HANDLER_NAME = "hrdash-console"


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def init_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single console handler to the ``hrdash`` logger (safe to call twice)."""
    logger = logging.getLogger("hrdash")
    logger.setLevel(_parse_level(level))

    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
