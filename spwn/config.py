#===============================================================================
#  spwn | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Runtime settings resolved from the environment on top of constants.py.
#  Nothing is persisted; every launch starts from these values.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import COMMAND_PREFIX, DEFAULT_LOG_LEVEL
from .env_manager import EnvironmentProvider, current_environment

LOG_LEVEL_ENV = "SPWN_LOG_LEVEL"
LOG_DIR_ENV = "SPWN_LOG_DIR"
PREFIX_ENV = "SPWN_COMMAND_PREFIX"


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_dir: Path
    command_prefix: str = COMMAND_PREFIX


def default_log_dir(env: EnvironmentProvider) -> Path:
    if env.is_windows:
        base = env.get("LOCALAPPDATA")
        if base:
            return Path(base) / "spwn" / "logs"
    cache = env.get("XDG_CACHE_HOME")
    root = Path(cache) if cache else env.home() / ".cache"
    return root / "spwn" / "logs"


def _valid_level(name: str) -> bool:
    return isinstance(logging.getLevelName(name.upper()), int)


def load_settings(env: Optional[EnvironmentProvider] = None) -> Settings:
    """Resolve settings. Unknown log levels and multi-char prefixes fall back to defaults."""
    env = env or current_environment()

    level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
    if not _valid_level(level):
        level = DEFAULT_LOG_LEVEL

    log_dir_raw = env.get(LOG_DIR_ENV).strip()
    log_dir = Path(log_dir_raw) if log_dir_raw else default_log_dir(env)

    prefix = env.get(PREFIX_ENV, COMMAND_PREFIX).strip()
    if len(prefix) != 1:
        prefix = COMMAND_PREFIX

    return Settings(log_level=level.upper(), log_dir=log_dir, command_prefix=prefix)
