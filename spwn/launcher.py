#===============================================================================
#  spwn | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Runs a command line to completion and returns its captured output.
#    - POSIX: shell-style word splitting, program + argv, no shell involved
#    - Windows: whole line handed to cmd /C
#  The blocking subprocess call runs on a worker thread so the UI loop stays live.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import asyncio
import logging
import shlex
import subprocess
import sys
from typing import Awaitable, Callable, List, Optional, Union

from .models import ExecutionResult

logger = logging.getLogger(__name__)

Runner = Callable[[str], Awaitable[ExecutionResult]]


class CommandError(RuntimeError):
    """Base for failures that end up as result text instead of a crash."""


class CommandParseError(CommandError):
    pass


class CommandLaunchError(CommandError):
    pass


class CommandFailedError(CommandError):
    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        if stderr:
            message = stderr
        else:
            message = f"Command failed with status {returncode}"
        super().__init__(message)


def split_command(command_line: str) -> List[str]:
    try:
        return shlex.split(command_line)
    except ValueError as e:
        raise CommandParseError(f"Parse error: {e}") from e


def _run_blocking(args: Union[List[str], str]) -> subprocess.CompletedProcess:
    # a str is handed to CreateProcess as-is on Windows (no argv re-quoting)
    try:
        return subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise CommandLaunchError(str(e)) from e


def _token_exec(command_line: str) -> str:
    argv = split_command(command_line)
    if not argv:
        return ""

    p = _run_blocking(argv)
    if p.returncode != 0:
        try:
            err = p.stderr.decode("utf-8")
        except UnicodeDecodeError:
            err = "Unknown error"
        raise CommandFailedError(p.returncode, err)

    try:
        return p.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommandError(f"Output is not valid UTF-8: {e}") from e


def passthrough_command_line(command_line: str) -> str:
    """The exact line cmd.exe receives; the user text is appended untouched."""
    return f"cmd /C {command_line}"


def _shell_passthrough(command_line: str) -> str:
    p = _run_blocking(passthrough_command_line(command_line))
    if p.returncode != 0:
        err = p.stderr.decode("utf-8", errors="replace")
        raise CommandFailedError(p.returncode, err if err.strip() else "")
    return p.stdout.decode("utf-8", errors="replace")


async def _run(fn: Callable[[str], str], command_line: str) -> ExecutionResult:
    logger.info("Running: %s", command_line)
    try:
        out = await asyncio.to_thread(fn, command_line)
    except CommandError as e:
        logger.info("Command failed: %s", e)
        return ExecutionResult.failure(str(e))
    return ExecutionResult.success(out)


async def run_token_exec(command_line: str) -> ExecutionResult:
    """Split with shell quoting rules and exec the program directly."""
    return await _run(_token_exec, command_line)


async def run_shell_passthrough(command_line: str) -> ExecutionResult:
    """Hand the unmodified line to cmd /C (decodes leniently)."""
    return await _run(_shell_passthrough, command_line)


def select_discipline(platform: Optional[str] = None) -> Runner:
    platform = platform or sys.platform
    if platform.startswith("win"):
        return run_shell_passthrough
    return run_token_exec


async def run_command(command_line: str, platform: Optional[str] = None) -> ExecutionResult:
    """Run once, wait for exit, and map the outcome to an ExecutionResult.

    Empty input never spawns a process. There is no retry and no timeout.
    """
    if not command_line.strip():
        return ExecutionResult.success("")
    return await select_discipline(platform)(command_line)
