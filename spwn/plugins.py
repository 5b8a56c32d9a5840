#===============================================================================
#  spwn | plugins.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Input handlers and the registry that picks one per submission.
#    - ShellPlugin: "> cmd" runs cmd through the command runner
#    - AppPlugin  : never claims raw input; launches the selected app instead
#  Handlers are consulted in registration order and the first match wins.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Awaitable, List, Optional

from .constants import COMMAND_PREFIX
from .launcher import Runner, run_command
from .models import ApplicationEntry, ExecutionResult

logger = logging.getLogger(__name__)


class Plugin(ABC):
    """A stateless handler that may claim an input and produce a result."""

    name = "plugin"

    def __init__(self, runner: Runner = run_command):
        self.runner = runner

    @abstractmethod
    def can_handle(self, raw_input: str) -> bool:
        ...

    @abstractmethod
    async def execute(self, raw_input: str) -> ExecutionResult:
        ...


class ShellPlugin(Plugin):
    name = "shell"

    def __init__(self, runner: Runner = run_command, prefix: str = COMMAND_PREFIX):
        super().__init__(runner)
        self.prefix = prefix

    def can_handle(self, raw_input: str) -> bool:
        return raw_input.strip().startswith(self.prefix)

    def strip_prefix(self, raw_input: str) -> str:
        return raw_input.strip().lstrip(self.prefix).strip()

    async def execute(self, raw_input: str) -> ExecutionResult:
        command = self.strip_prefix(raw_input)
        if not command:
            return ExecutionResult.success("")
        return await self.runner(command)


class AppPlugin(Plugin):
    name = "app"

    def can_handle(self, raw_input: str) -> bool:
        # only reachable through the fallback path
        return False

    async def execute(self, raw_input: str) -> ExecutionResult:
        if not raw_input:
            return ExecutionResult.success("")
        return await self.runner(raw_input)


class PluginRegistry:
    """Ordered handler list plus the fallback used to launch a selection."""

    def __init__(self, plugins: Optional[List[Plugin]] = None, fallback: Optional[Plugin] = None):
        self._plugins: List[Plugin] = []
        self._fallback = fallback
        for plugin in plugins or []:
            self.register(plugin)

    @property
    def plugins(self) -> List[Plugin]:
        return list(self._plugins)

    @property
    def fallback(self) -> Optional[Plugin]:
        return self._fallback

    def register(self, plugin: Plugin) -> None:
        self._plugins.append(plugin)
        if self._fallback is None and isinstance(plugin, AppPlugin):
            self._fallback = plugin

    def resolve(self, raw_input: str) -> Optional[Plugin]:
        for plugin in self._plugins:
            if plugin.can_handle(raw_input):
                return plugin
        return None

    def dispatch(
        self,
        raw_input: str,
        fallback_selection: Optional[ApplicationEntry] = None,
    ) -> Optional[Awaitable[ExecutionResult]]:
        """Pick the handler and return its pending result, or None when nothing runs.

        No coroutine is created on the no-op path, so callers can decide
        whether to enter the executing state before awaiting anything.
        """
        plugin = self.resolve(raw_input)
        if plugin is not None:
            logger.debug("Input claimed by %s handler", plugin.name)
            return plugin.execute(raw_input)

        if fallback_selection is None or self._fallback is None:
            return None

        logger.info("Launching: %s", fallback_selection.name)
        return self._fallback.execute(fallback_selection.exec_command)

    async def resolve_and_run(
        self,
        raw_input: str,
        fallback_selection: Optional[ApplicationEntry] = None,
    ) -> Optional[ExecutionResult]:
        pending = self.dispatch(raw_input, fallback_selection)
        if pending is None:
            return None
        return await pending


def default_registry(runner: Runner = run_command, prefix: str = COMMAND_PREFIX) -> PluginRegistry:
    return PluginRegistry([ShellPlugin(runner, prefix=prefix), AppPlugin(runner)])
