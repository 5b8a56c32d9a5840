#===============================================================================
#  spwn | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for window sizing, theme, prefixes and desktop-entry naming.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "spwn"
INPUT_PLACEHOLDER = "Search apps or use > for commands..."

# Inputs starting with this marker are run as commands instead of searched.
COMMAND_PREFIX = ">"

# --- Desktop entries (freedesktop layout) ---
DESKTOP_ENTRY_SUFFIX = ".desktop"
DESKTOP_ENTRY_SECTION = "Desktop Entry"
APPLICATIONS_SUBDIR = "applications"
DATA_DIRS_ENV = "XDG_DATA_DIRS"
DATA_HOME_ENV = "XDG_DATA_HOME"
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"

# --- Windows Start Menu ---
START_MENU_SUBPATH = ("Microsoft", "Windows", "Start Menu", "Programs")
START_MENU_SUFFIXES = (".lnk", ".exe")

# --- Logging ---
LOG_FILE_NAME = "spwn.log"
DEFAULT_LOG_LEVEL = "INFO"

# --- Window geometry (width x height per display state) ---
WINDOW_WIDTH = 500
HEIGHT_COLLAPSED = 60
HEIGHT_WITH_RESULTS = 400
HEIGHT_WITH_OUTPUT = 500
RESULT_LIST_HEIGHT = 340

# --- Dark theme ---
THEME_BG = "#101010"
THEME_PANEL = "#1a1a1a"
THEME_BORDER = "#2a2a2a"
THEME_SELECTED = "#3366cc"
