"""
Logging setup for the hsacl command line.

- Logs to stderr so command output on stdout stays clean.
- Optionally also to a rotating file (Settings.log_file).
- The index itself never logs; commands do.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level_name: str = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("hsacl")
    logger.setLevel(level)
    logger.propagate = False  # avoid duplicate logs

    # Clear existing handlers if any (idempotent setup)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
