#===============================================================================
#  spwn | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Builds the application index once at startup:
#    - Linux: *.desktop entries under <data dir>/applications (no recursion)
#    - Windows: .lnk/.exe files under the Start Menu "Programs" folders
#  Results are sorted by name and de-duplicated (earlier sources win).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .constants import (
    APPLICATIONS_SUBDIR,
    DATA_DIRS_ENV,
    DATA_HOME_ENV,
    DEFAULT_DATA_DIRS,
    DESKTOP_ENTRY_SECTION,
    DESKTOP_ENTRY_SUFFIX,
    START_MENU_SUBPATH,
    START_MENU_SUFFIXES,
)
from .env_manager import EnvironmentProvider, current_environment
from .models import ApplicationEntry

logger = logging.getLogger(__name__)


def parse_desktop_entry(text: str) -> Optional[ApplicationEntry]:
    """Parse the text of a .desktop file.

    Only keys inside [Desktop Entry] count. Exec keeps its first token only
    (field codes like %U and the rest of the command line are dropped).
    Returns None when Name/Exec are missing or NoDisplay=true.
    """
    name: Optional[str] = None
    exec_command: Optional[str] = None
    icon: Optional[str] = None
    in_primary = False

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("[") and line.endswith("]"):
            if in_primary:
                # primary section is over; nothing after it is honored
                break
            in_primary = line[1:-1].strip() == DESKTOP_ENTRY_SECTION
            continue

        if not in_primary or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()

        if key == "Name":
            name = value
        elif key == "Exec":
            tokens = value.split()
            exec_command = tokens[0] if tokens else None
        elif key == "Icon":
            icon = value or None
        elif key == "NoDisplay" and value == "true":
            return None

    if not name or not exec_command:
        return None
    return ApplicationEntry(name=name, exec_command=exec_command, icon_reference=icon)


def read_desktop_file(path: Path) -> Optional[ApplicationEntry]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Skipping unreadable desktop entry %s: %s", path, e)
        return None
    return parse_desktop_entry(text)


def scan_applications_dir(apps_dir: Path) -> List[ApplicationEntry]:
    """Scan one applications folder (top level only) for desktop entries."""
    entries: List[ApplicationEntry] = []
    try:
        candidates = sorted(
            p for p in apps_dir.iterdir()
            if p.suffix == DESKTOP_ENTRY_SUFFIX and p.is_file()
        )
    except OSError as e:
        logger.debug("Skipping applications folder %s: %s", apps_dir, e)
        return entries

    for item in candidates:
        entry = read_desktop_file(item)
        if entry:
            entries.append(entry)
    return entries


def sort_and_dedupe(entries: Iterable[ApplicationEntry]) -> List[ApplicationEntry]:
    """Stable sort by name, then keep the first entry for each name."""
    out: List[ApplicationEntry] = []
    for entry in sorted(entries, key=lambda e: e.name):
        if out and out[-1].name == entry.name:
            continue
        out.append(entry)
    return out


class DesktopEntryProvider:
    """freedesktop.org desktop entries from the XDG data directories."""

    def __init__(self, env: EnvironmentProvider):
        self.env = env

    def data_dirs(self) -> List[Path]:
        """Search order: user data home first, then XDG_DATA_DIRS (or the default pair)."""
        data_home = self.env.get(DATA_HOME_ENV).strip()
        dirs = [Path(data_home) if data_home else self.env.home() / ".local" / "share"]

        raw = self.env.get(DATA_DIRS_ENV).strip() or DEFAULT_DATA_DIRS
        dirs.extend(Path(p) for p in raw.split(":") if p.strip())
        return dirs

    def get_apps(self) -> List[ApplicationEntry]:
        apps: List[ApplicationEntry] = []
        for base in self.data_dirs():
            apps.extend(scan_applications_dir(base / APPLICATIONS_SUBDIR))
        return apps


class StartMenuProvider:
    """Windows Start Menu shortcuts (per-user and all-users)."""

    def __init__(self, env: EnvironmentProvider):
        self.env = env

    def roots(self) -> List[Path]:
        roots: List[Path] = []
        for var in ("APPDATA", "PROGRAMDATA"):
            base = self.env.get(var).strip()
            if base:
                roots.append(Path(base).joinpath(*START_MENU_SUBPATH))
        return roots

    def get_apps(self) -> List[ApplicationEntry]:
        apps: List[ApplicationEntry] = []
        for root in self.roots():
            if not root.is_dir():
                continue
            try:
                items = sorted(root.rglob("*"))
            except OSError as e:
                logger.debug("Skipping Start Menu folder %s: %s", root, e)
                continue
            for item in items:
                if item.suffix.lower() in START_MENU_SUFFIXES and item.is_file():
                    # cmd /C needs the path quoted when it contains spaces
                    apps.append(ApplicationEntry(name=item.stem, exec_command=f'"{item}"'))
        return apps


def provider_for(env: EnvironmentProvider):
    if env.is_windows:
        return StartMenuProvider(env)
    return DesktopEntryProvider(env)


def build_index(env: Optional[EnvironmentProvider] = None) -> List[ApplicationEntry]:
    """Build the ordered, de-duplicated application index.

    Never raises: a failing source degrades to an empty index.
    """
    env = env or current_environment()
    provider = provider_for(env)
    try:
        apps = sort_and_dedupe(provider.get_apps())
    except Exception:
        logger.exception("Application index could not be built; continuing with no apps")
        return []

    logger.info("Indexed %d applications via %s", len(apps), type(provider).__name__)
    return apps
