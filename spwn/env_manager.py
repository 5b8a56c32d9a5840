#===============================================================================
#  spwn | env_manager.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Injectable view of the host environment (variables, home folder, platform)
#  so index building and command dispatch can run against synthetic trees.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional


class EnvironmentProvider:
    """Reads environment variables, the home folder and the platform name.

    The default instance reflects the running process. Tests pass their own
    mapping/home/platform instead of patching os.environ.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
        platform: Optional[str] = None,
    ):
        self._environ = environ if environ is not None else os.environ
        self._home = Path(home) if home is not None else None
        self.platform = platform or sys.platform

    def get(self, key: str, default: str = "") -> str:
        return self._environ.get(key, default)

    def home(self) -> Path:
        if self._home is not None:
            return self._home
        return Path.home()

    @property
    def is_windows(self) -> bool:
        return self.platform.startswith("win")


def current_environment() -> EnvironmentProvider:
    return EnvironmentProvider()
