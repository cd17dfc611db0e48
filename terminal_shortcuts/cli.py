"""
terminal-shortcuts: named shell commands, one keystroke away.

This module provides the command-line interface: it shows the shortcuts
panel built from the global and workspace action files, runs actions in
tmux-backed terminals and keeps the panel in sync with the files.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from terminal_shortcuts.core.context import AppContext
from terminal_shortcuts.core.exceptions import (
    ActionNotFoundError,
    ConfigurationError,
    TerminalError,
)
from terminal_shortcuts.shortcuts.nodes import OPEN_GLOBAL_ACTION, OPEN_WORKSPACE_ACTION, TreeNode
from terminal_shortcuts.ui import render_panel, watch_panel

console = Console()

# Global AppContext instance - will be initialized on first use
_app_context: Optional[AppContext] = None
_context_options: dict = {}


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        try:
            _app_context = AppContext(**_context_options)
        except ConfigurationError as e:
            console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
            sys.exit(1)
        except Exception as e:
            console.print(f"[red]Failed to initialize application: {escape(str(e))}[/red]")
            sys.exit(1)
    return _app_context


app = typer.Typer(
    name="terminal-shortcuts",
    help="Run your favourite shell commands from a panel of grouped shortcuts.",
    no_args_is_help=True,
)


class ConfigScope(str, Enum):
    GLOBAL = "global"
    WORKSPACE = "workspace"


@app.callback()
def main(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (defaults to config.toml in the app directory).",
    ),
    workspace: Optional[Path] = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Project root holding .vscode/terminal-shortcuts-workspace.json. Discovered from the current directory if omitted.",
    ),
    no_workspace: bool = typer.Option(
        False,
        "--no-workspace",
        help="Ignore workspace action files.",
    ),
):
    """
    Named shell commands grouped into a panel, dispatched to named terminals.
    """
    global _app_context
    _app_context = None
    _context_options.clear()
    _context_options.update(
        config_path=config,
        workspace_root=workspace,
        use_workspace=not no_workspace,
    )


def _resolve_leaf(ctx: AppContext, ref: str) -> Tuple[str, TreeNode]:
    """Find a leaf by its panel number or by 'Group/Label'."""
    leaves = ctx.provider.leaves()
    if ref.isdigit():
        index = int(ref)
        if 1 <= index <= len(leaves):
            return leaves[index - 1]
        raise ActionNotFoundError(f"No action number {index} (the panel has {len(leaves)})")

    group, sep, label = ref.partition("/")
    for leaf_group, leaf in leaves:
        if sep:
            if leaf_group == group and label in (leaf.label, leaf.label.split(" [", 1)[0]):
                return leaf_group, leaf
        elif ref in (leaf.label, leaf.label.split(" [", 1)[0]):
            return leaf_group, leaf
    raise ActionNotFoundError(f"No action matches '{ref}'")


@app.command("tree")
def show_tree():
    """
    Show the shortcuts panel: config buttons, then every group and its actions.
    """
    ctx = get_app_context()
    console.print(render_panel(ctx.provider))


@app.command("run")
def run_action(
    ref: str = typer.Argument(
        ...,
        help="Action number from 'tree', 'Group/Label' or just 'Label'.",
    ),
):
    """
    Run an action from the panel in its terminal.
    """
    ctx = get_app_context()
    try:
        group, leaf = _resolve_leaf(ctx, ref)
        ctx.logger.debug(f"Resolved '{ref}' to {group}/{leaf.label}")
        ctx.execute_action(leaf.activation.action, *leaf.activation.args)
    except ActionNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except TerminalError as e:
        console.print(f"[red]Terminal error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command("exec")
def exec_command(
    command: str = typer.Argument(..., help="Shell command to send."),
    terminal: Optional[str] = typer.Option(
        None,
        "--terminal",
        "-t",
        help="Terminal name; reused if it exists, created otherwise. Uses the active terminal if omitted.",
    ),
):
    """
    Send an ad-hoc command to a terminal without defining an action.
    """
    ctx = get_app_context()
    try:
        ctx.execute_action("terminal.run", command, terminal)
    except TerminalError as e:
        console.print(f"[red]Terminal error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


@app.command("open")
def open_config(
    scope: ConfigScope = typer.Argument(ConfigScope.GLOBAL, help="Which action file to open."),
):
    """
    Open an action file in your editor. The workspace file is created on first use.
    """
    ctx = get_app_context()
    action = OPEN_GLOBAL_ACTION if scope is ConfigScope.GLOBAL else OPEN_WORKSPACE_ACTION
    path = ctx.execute_action(action)
    if path is None:
        raise typer.Exit(code=1)


@app.command("paths")
def show_paths():
    """
    Show where the global and workspace action files live.
    """
    ctx = get_app_context()

    table = Table(title="Action files")
    table.add_column("Source", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Exists", justify="center")

    rows: List[Tuple[str, Optional[Path]]] = [
        ("Global", ctx.provider.global_config_path),
        ("Workspace", ctx.provider.workspace_config_path),
    ]
    for source, path in rows:
        if path is None:
            table.add_row(source, "[dim]no project open[/dim]", "-")
        else:
            table.add_row(source, escape(str(path)), "✓" if path.exists() else "✗")

    console.print(table)


@app.command("terminals")
def list_terminals():
    """
    List the terminal sessions commands can be sent to.
    """
    ctx = get_app_context()
    try:
        sessions = ctx.terminal_host.sessions()
    except TerminalError as e:
        console.print(f"[red]Terminal error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if not sessions:
        console.print("[yellow]No terminal sessions yet. Running an action creates one.[/yellow]")
        return

    table = Table(title="Terminals")
    table.add_column("Name", style="green")
    table.add_column("Active", justify="center")
    for session in sessions:
        table.add_row(escape(session.name), "●" if getattr(session, "active", False) else "")
    console.print(table)


@app.command("watch")
def watch():
    """
    Show the panel and keep it in sync with the action files until Ctrl+C.
    """
    ctx = get_app_context()
    try:
        watch_panel(ctx.provider, ctx.watcher, console)
    finally:
        ctx.close()


if __name__ == "__main__":
    app()
