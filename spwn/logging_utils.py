#===============================================================================
#  spwn | logging_utils.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Console + file logging for the launcher. Modules log through
#  logging.getLogger(__name__); this only wires handlers on the "spwn" logger.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging

from .config import Settings
from .constants import LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger("spwn")
    logger.setLevel(settings.log_level)

    # Avoid duplicate handlers if called twice
    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    try:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(settings.log_dir / LOG_FILE_NAME, encoding="utf-8")
    except OSError as e:
        logger.warning("File logging disabled (%s): %s", settings.log_dir, e)
    else:
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized at level %s", settings.log_level)
    return logger
