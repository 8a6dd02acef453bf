from __future__ import annotations

import logging
import os
import sys

from pydfm.utils.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``pydfm`` logger namespace. Safe to call more than once."""
    log_level = os.environ.get(LOG_LEVEL_ENV) or level or DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    root = logging.getLogger("pydfm")
    root.setLevel(numeric_level)

    if not any(getattr(h, "_pydfm", False) for h in root.handlers):
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        handler._pydfm = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.propagate = False  # prevent duplicate output via root logger

    return root
