import pytest

from conftest import FakeRunner
from spwn.models import ApplicationEntry, ExecutionResult
from spwn.plugins import AppPlugin, Plugin, PluginRegistry, ShellPlugin, default_registry


class ClaimEverything(Plugin):
    name = "greedy"

    def can_handle(self, raw_input):
        return True

    async def execute(self, raw_input):
        return ExecutionResult.success(f"greedy:{raw_input}")


FIREFOX = ApplicationEntry(name="Firefox", exec_command="firefox")


def test_shell_plugin_matches_trimmed_prefix():
    shell = ShellPlugin(FakeRunner())

    assert shell.can_handle("> ls")
    assert shell.can_handle("   >ls")
    assert not shell.can_handle("ls > out")
    assert not shell.can_handle("")


def test_app_plugin_never_claims_raw_input():
    app = AppPlugin(FakeRunner())

    assert not app.can_handle("firefox")
    assert not app.can_handle("> ls")


@pytest.mark.asyncio
async def test_shell_plugin_strips_prefix_and_whitespace(fake_runner):
    shell = ShellPlugin(fake_runner)

    await shell.execute("  >>  ls -l /tmp  ")

    assert fake_runner.calls == ["ls -l /tmp"]


@pytest.mark.asyncio
async def test_shell_plugin_with_nothing_after_prefix_skips_runner(fake_runner):
    result = await ShellPlugin(fake_runner).execute(">   ")

    assert result == ExecutionResult.success("")
    assert fake_runner.calls == []


@pytest.mark.asyncio
async def test_prefixed_input_runs_command_not_selection(fake_runner):
    registry = default_registry(fake_runner)

    result = await registry.resolve_and_run("> echo hi", FIREFOX)

    assert result == ExecutionResult.success("ok")
    assert fake_runner.calls == ["echo hi"]


@pytest.mark.asyncio
async def test_first_match_wins_in_registration_order(fake_runner):
    shell_first = PluginRegistry([ShellPlugin(fake_runner), ClaimEverything(), AppPlugin(fake_runner)])
    greedy_first = PluginRegistry([ClaimEverything(), ShellPlugin(fake_runner), AppPlugin(fake_runner)])

    assert await shell_first.resolve_and_run("> pwd") == ExecutionResult.success("ok")
    assert await greedy_first.resolve_and_run("> pwd") == ExecutionResult.success("greedy:> pwd")
    assert fake_runner.calls == ["pwd"]


@pytest.mark.asyncio
async def test_unclaimed_input_launches_selection(fake_runner):
    registry = default_registry(fake_runner)

    result = await registry.resolve_and_run("fire", FIREFOX)

    assert result == ExecutionResult.success("ok")
    assert fake_runner.calls == ["firefox"]


def test_unclaimed_input_without_selection_is_a_noop(fake_runner):
    registry = default_registry(fake_runner)

    assert registry.dispatch("fire", None) is None
    assert fake_runner.calls == []


@pytest.mark.asyncio
async def test_resolve_and_run_noop_returns_none(fake_runner):
    assert await default_registry(fake_runner).resolve_and_run("nothing") is None


def test_registry_order_and_fallback():
    shell = ShellPlugin(FakeRunner())
    app = AppPlugin(FakeRunner())
    registry = PluginRegistry()
    registry.register(shell)
    registry.register(app)

    assert registry.plugins == [shell, app]
    assert registry.fallback is app
    assert registry.resolve("> x") is shell
    assert registry.resolve("x") is None


def test_custom_prefix():
    registry = default_registry(FakeRunner(), prefix="!")

    assert isinstance(registry.resolve("! uptime"), ShellPlugin)
    assert registry.resolve("> uptime") is None
