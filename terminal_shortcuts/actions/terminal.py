"""
Action: Run a shell command in a terminal.

This is the activation behind every action leaf in the panel.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.context import AppContext


def run(ctx: "AppContext", command: str, terminal: Optional[str] = None) -> str:
    """
    Send a command to a named terminal, or to the active one.

    Args:
        ctx: The application's context.
        command: Shell command text.
        terminal: Optional terminal name; reused if it exists, else created.

    Returns:
        str: Name of the terminal the command was sent to.
    """
    ctx.logger.info("Executing action: terminal.run")
    session = ctx.router.dispatch(command, terminal)
    return session.name
