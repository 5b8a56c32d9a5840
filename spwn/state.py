#===============================================================================
#  spwn | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Interaction state for one launcher window: query, mode, filtered apps,
#  selection, result text, visibility and the single in-flight execution.
#  All transitions happen on the UI loop thread; nothing here is persisted.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

from .constants import COMMAND_PREFIX
from .models import ApplicationEntry, Direction, ExecutionResult, Mode, StateSnapshot
from .plugins import PluginRegistry

logger = logging.getLogger(__name__)

Listener = Callable[[StateSnapshot], None]


@dataclass
class InteractionState:
    query: str = ""
    mode: Mode = Mode.SEARCH
    filtered: List[ApplicationEntry] = field(default_factory=list)
    selected_index: int = 0
    result_text: str = ""
    has_result: bool = False
    visible: bool = True
    pending: bool = False
    session: int = 0


def filter_apps(apps: Sequence[ApplicationEntry], query: str) -> List[ApplicationEntry]:
    """Case-insensitive substring match on names, index order preserved."""
    needle = query.lower()
    return [app for app in apps if needle in app.name.lower()]


class LauncherState:
    """Event-driven state machine behind the launcher window.

    Events: query_changed, navigate, submit, execution_completed,
    toggle_visibility, close. Listeners receive a snapshot after each change.
    """

    def __init__(
        self,
        apps: Sequence[ApplicationEntry],
        registry: PluginRegistry,
        prefix: str = COMMAND_PREFIX,
    ):
        self.apps = tuple(apps)
        self.registry = registry
        self.prefix = prefix
        self.state = InteractionState()
        self.closed = False
        self._listeners: List[Listener] = []
        self._close_listeners: List[Callable[[], None]] = []

    # ----------------------------
    # Observers
    # ----------------------------
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def on_close(self, callback: Callable[[], None]) -> None:
        self._close_listeners.append(callback)

    def snapshot(self) -> StateSnapshot:
        s = self.state
        return StateSnapshot(
            query=s.query,
            mode=s.mode,
            entries=tuple(s.filtered),
            selected_index=s.selected_index,
            result_text=s.result_text,
            has_result=s.has_result,
            pending=s.pending,
            visible=s.visible,
        )

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)

    @property
    def selected(self) -> Optional[ApplicationEntry]:
        s = self.state
        if not s.filtered:
            return None
        return s.filtered[s.selected_index]

    # ----------------------------
    # Events
    # ----------------------------
    def query_changed(self, text: str) -> None:
        if self.closed:
            return
        s = self.state
        s.query = text
        s.selected_index = 0
        s.result_text = ""
        s.has_result = False

        if not text:
            s.mode = Mode.SEARCH
            s.filtered = []
        elif text.startswith(self.prefix):
            s.mode = Mode.COMMAND
            s.filtered = []
        else:
            s.mode = Mode.SEARCH
            s.filtered = filter_apps(self.apps, text)

        self._notify()

    def navigate(self, direction: Direction) -> None:
        s = self.state
        if self.closed or not s.filtered:
            return
        count = len(s.filtered)
        if direction is Direction.NEXT:
            s.selected_index = (s.selected_index + 1) % count
        else:
            s.selected_index = (s.selected_index - 1) % count
        self._notify()

    def submit(self) -> Optional[Awaitable[ExecutionResult]]:
        """Start an execution for the current query.

        Returns an awaitable that finishes the execution and feeds the result
        back through execution_completed, or None when nothing was started
        (already pending, or no handler and no selection).
        """
        s = self.state
        if self.closed:
            return None
        if s.pending:
            logger.debug("Submit ignored: an execution is already running")
            return None

        pending = self.registry.dispatch(s.query, self.selected)
        if pending is None:
            return None

        s.pending = True
        self._notify()
        return self._complete(pending, s.session)

    async def _complete(self, pending: Awaitable[ExecutionResult], session: int) -> ExecutionResult:
        try:
            result = await pending
        except Exception as e:
            logger.exception("Execution raised instead of returning a result")
            result = ExecutionResult.failure(str(e))
        self.execution_completed(result, session)
        return result

    def execution_completed(self, result: ExecutionResult, session: Optional[int] = None) -> None:
        s = self.state
        s.pending = False
        if session is not None and session != s.session:
            # finished after the window was re-shown; the fresh session keeps its blank output
            logger.debug("Dropping result from stale session %s", session)
        else:
            s.result_text = result.text
            s.has_result = True
        if not self.closed:
            self._notify()

    def toggle_visibility(self) -> bool:
        """Flip visibility. Showing starts a fresh session; returns the new visibility."""
        if self.closed:
            return False
        s = self.state
        if s.visible:
            s.visible = False
        else:
            s.visible = True
            s.query = ""
            s.mode = Mode.SEARCH
            s.filtered = []
            s.selected_index = 0
            s.result_text = ""
            s.has_result = False
            s.session += 1
        self._notify()
        return s.visible

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.state.visible = False
        logger.info("Close requested")
        for callback in list(self._close_listeners):
            callback()
