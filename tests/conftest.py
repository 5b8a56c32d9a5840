from pathlib import Path
from typing import List

import pytest

from spwn.env_manager import EnvironmentProvider
from spwn.models import ApplicationEntry, ExecutionResult


class FakeRunner:
    """Stands in for run_command and records every command line it receives."""

    def __init__(self, result: ExecutionResult = ExecutionResult.success("ok")):
        self.result = result
        self.calls: List[str] = []

    async def __call__(self, command_line: str) -> ExecutionResult:
        self.calls.append(command_line)
        return self.result


def write_entry(apps_dir: Path, filename: str, body: str) -> Path:
    apps_dir.mkdir(parents=True, exist_ok=True)
    path = apps_dir / filename
    path.write_text(body, encoding="utf-8")
    return path


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def sample_apps():
    return [
        ApplicationEntry(name="Files", exec_command="nautilus"),
        ApplicationEntry(name="Firefox", exec_command="firefox", icon_reference="firefox"),
        ApplicationEntry(name="Terminal", exec_command="gnome-terminal"),
    ]


@pytest.fixture
def linux_env(tmp_path):
    """Environment with a synthetic data home and a single system data dir."""
    data_home = tmp_path / "home" / ".local" / "share"
    system = tmp_path / "usr" / "share"
    env = EnvironmentProvider(
        environ={"XDG_DATA_HOME": str(data_home), "XDG_DATA_DIRS": str(system)},
        home=tmp_path / "home",
        platform="linux",
    )
    env.data_home = data_home
    env.system_dir = system
    return env
