#===============================================================================
#  spwn | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Startup wiring: settings, logging, application index, handlers, state,
#  window, and the Qt-driven asyncio loop.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import sys

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from .config import load_settings
from .env_manager import current_environment
from .fs_discovery import build_index
from .logging_utils import setup_logging
from .main_window import MainWindow
from .plugins import default_registry
from .state import LauncherState


def create_launcher(env=None, settings=None) -> LauncherState:
    """Build the index and handlers and return a fresh state machine."""
    env = env or current_environment()
    settings = settings or load_settings(env)
    apps = build_index(env)
    registry = default_registry(prefix=settings.command_prefix)
    return LauncherState(apps, registry, prefix=settings.command_prefix)


def main():
    env = current_environment()
    settings = load_settings(env)
    setup_logging(settings)

    launcher = create_launcher(env, settings)

    app = QApplication(sys.argv)
    window = MainWindow(launcher)
    window.show()
    window.center_on_screen()

    QtAsyncio.run(handle_sigint=True)
