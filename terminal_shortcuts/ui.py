"""
Console UI components for terminal-shortcuts.

This module renders the shortcuts panel with Rich and provides the console
message surface used by the rest of the application.
"""

import logging
from typing import Dict, Optional

from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.rule import Rule
from rich.text import Text
from rich.tree import Tree

from terminal_shortcuts.shortcuts.nodes import NodeKind, TreeNode
from terminal_shortcuts.shortcuts.provider import ActionTreeProvider
from terminal_shortcuts.services.config_watcher import ConfigWatcher

ICONS: Dict[Optional[str], str] = {
    "gear": "⚙",
    "terminal": "▶",
    None: "",
}


class ConsoleNotifier:
    """Shows info, warning and error messages on a Rich console and logs them."""

    def __init__(self, console: Optional[Console] = None, logger: Optional[logging.Logger] = None):
        self.console = console or Console()
        self.logger = logger

    def info(self, message: str) -> None:
        if self.logger:
            self.logger.debug(message)
        self.console.print(f"[green]{escape(message)}[/green]")

    def warning(self, message: str) -> None:
        if self.logger:
            self.logger.warning(message)
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str) -> None:
        if self.logger:
            self.logger.error(message)
        self.console.print(f"[red]{escape(message)}[/red]")


def _node_text(node: TreeNode, number: Optional[int] = None) -> Text:
    text = Text()
    if number is not None:
        text.append(f"{number:>2}. ", style="cyan")
    icon = ICONS.get(node.icon, "")
    if icon:
        text.append(f"{icon} ")
    style = "bold" if node.kind is NodeKind.GROUP else ("dim" if node.kind is NodeKind.CONFIG_BUTTON else "")
    text.append(node.label, style=style)
    if node.kind is NodeKind.LEAF and node.tooltip:
        text.append(f"  {node.tooltip}", style="dim italic")
    return text


def render_panel(provider: ActionTreeProvider, title: str = "Terminal Shortcuts") -> Tree:
    """
    Render the provider's hierarchy as a Rich tree.

    Leaves are numbered in display order so they can be run by number.

    Args:
        provider: Source of the panel entries
        title: Root label

    Returns:
        Rich Tree ready to print
    """
    tree = Tree(Text(title, style="bold magenta"))
    number = 0
    for node in provider.get_children():
        if node.kind is NodeKind.SEPARATOR:
            tree.add(Rule(style="dim"))
            continue
        branch = tree.add(_node_text(node))
        if node.expandable:
            for leaf in provider.get_children(node):
                number += 1
                branch.add(_node_text(leaf, number))
    return tree


def watch_panel(
    provider: ActionTreeProvider,
    watcher: ConfigWatcher,
    console: Optional[Console] = None,
) -> None:
    """
    Show the panel live, re-rendering after every reload, until Ctrl+C.

    Args:
        provider: Source of the panel entries
        watcher: Watcher driving the reloads
        console: Optional Rich console
    """
    console = console or Console()
    footer = Text("Watching for changes, press Ctrl+C to stop.", style="dim")

    with Live(Group(render_panel(provider), footer), console=console, auto_refresh=False) as live:

        def refresh() -> None:
            live.update(Group(render_panel(provider), footer), refresh=True)

        unsubscribe = provider.subscribe(refresh)
        try:
            watcher.run()
        finally:
            unsubscribe()
