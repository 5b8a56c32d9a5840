#===============================================================================
#  spwn | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the launcher (index entries, results, modes).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class ApplicationEntry:
    """Represents one launchable application discovered at startup."""
    name: str                              # display name, unique within the index
    exec_command: str                      # program to run (arguments stripped)
    icon_reference: Optional[str] = None   # icon name or path, if the source had one


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a single command run. Failure text is shown like output."""
    ok: bool
    text: str

    @classmethod
    def success(cls, text: str = "") -> "ExecutionResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, text: str) -> "ExecutionResult":
        return cls(ok=False, text=text)


class Mode(Enum):
    SEARCH = "search"
    COMMAND = "command"


class Direction(Enum):
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view of the interaction state handed to the UI for rendering."""
    query: str
    mode: Mode
    entries: Tuple[ApplicationEntry, ...]
    selected_index: int
    result_text: str
    has_result: bool
    pending: bool
    visible: bool

    @property
    def selected(self) -> Optional[ApplicationEntry]:
        if not self.entries:
            return None
        return self.entries[self.selected_index]
