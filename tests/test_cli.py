from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from terminal_shortcuts.cli import app
from terminal_shortcuts.core.context import AppContext
from terminal_shortcuts.core.exceptions import TerminalError

from conftest import FakeSession, FakeTerminalHost, RecordingNotifier, write_actions

runner = CliRunner()


@pytest.fixture
def ctx(tmp_path):
    config_path = tmp_path / "config.toml"
    config_path.write_text(f"""
[paths]
global_storage_dir = "{(tmp_path / 'storage').as_posix()}"
    """)
    write_actions(
        tmp_path / "storage" / "terminal-shortcuts-global.json",
        [{"label": "Ver", "command": "node --version", "group": "Tools"}],
    )
    project = tmp_path / "project"
    write_actions(
        project / ".vscode" / "terminal-shortcuts-workspace.json",
        [{"label": "Lint", "command": "npm run lint", "group": "Tools", "terminal": "lint"}],
    )
    context = AppContext(
        config_path,
        workspace_root=project,
        terminal_host=FakeTerminalHost([FakeSession("zsh", active=True)]),
        notifier=RecordingNotifier(),
        editor=MagicMock(),
    )
    yield context
    context.close()


def _invoke(ctx, args):
    with patch("terminal_shortcuts.cli.get_app_context", return_value=ctx):
        return runner.invoke(app, args)


def test_tree_command(ctx):
    """Test that the panel lists config buttons, groups and numbered actions"""
    result = _invoke(ctx, ["tree"])

    assert result.exit_code == 0
    assert "Open global config file..." in result.stdout
    assert "Open workspace config file..." in result.stdout
    assert "Tools" in result.stdout
    assert "1. ▶ Ver" in result.stdout
    assert "2. ▶ Lint [lint]" in result.stdout


def test_run_by_number(ctx):
    """Test running an unnamed action goes to the active terminal"""
    result = _invoke(ctx, ["run", "1"])

    assert result.exit_code == 0
    active = ctx.terminal_host.active_session()
    assert active.sent == ["node --version"]


def test_run_by_group_and_label(ctx):
    """Test running a named-terminal action by Group/Label"""
    result = _invoke(ctx, ["run", "Tools/Lint"])

    assert result.exit_code == 0
    created = ctx.terminal_host.created
    assert [s.name for s in created] == ["lint"]
    assert created[0].sent == ["npm run lint"]


def test_run_unknown_action(ctx):
    """Test that an unknown reference exits with an error"""
    result = _invoke(ctx, ["run", "7"])

    assert result.exit_code == 1
    assert "No action number 7" in result.stdout


def test_run_terminal_error(ctx):
    """Test that backend failures are reported instead of crashing"""
    ctx.terminal_host.active_session = MagicMock(side_effect=TerminalError("tmux is not installed"))

    result = _invoke(ctx, ["run", "Ver"])

    assert result.exit_code == 1
    assert "tmux is not installed" in result.stdout


def test_exec_command(ctx):
    """Test sending an ad-hoc command to a named terminal"""
    result = _invoke(ctx, ["exec", "make test", "--terminal", "build"])

    assert result.exit_code == 0
    assert ctx.terminal_host.created[0].name == "build"
    assert ctx.terminal_host.created[0].sent == ["make test"]


def test_open_workspace(ctx):
    """Test that open workspace hands the file to the editor"""
    result = _invoke(ctx, ["open", "workspace"])

    assert result.exit_code == 0
    ctx._editor.assert_called_once_with(ctx.provider.workspace_config_path)


def test_paths_command(ctx):
    """Test that both action file locations are shown"""
    result = _invoke(ctx, ["paths"])

    assert result.exit_code == 0
    assert "Global" in result.stdout
    assert "Workspace" in result.stdout


def test_terminals_command(ctx):
    """Test listing the terminal sessions"""
    result = _invoke(ctx, ["terminals"])

    assert result.exit_code == 0
    assert "zsh" in result.stdout


def test_watch_command_closes_context(ctx):
    """Test that watch shows the panel and cleans up when it ends"""
    with patch("terminal_shortcuts.cli.watch_panel") as mock_watch:
        result = _invoke(ctx, ["watch"])

    assert result.exit_code == 0
    mock_watch.assert_called_once()
    assert ctx.provider.global_watch is None
