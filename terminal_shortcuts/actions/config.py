"""
Action: Open the global or workspace action file.

These back the two config buttons at the top of the panel.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.context import AppContext


def open_global(ctx: "AppContext") -> Path:
    """
    Open the global action file in the editor.

    Args:
        ctx: The application's context.

    Returns:
        Path: The file that was opened.
    """
    ctx.logger.info("Executing action: config.open_global")
    path = ctx.provider.open_global_config()
    ctx.open_file(path)
    return path


def open_workspace(ctx: "AppContext") -> Optional[Path]:
    """
    Open the workspace action file, creating it on first use.

    Args:
        ctx: The application's context.

    Returns:
        Optional[Path]: The file that was opened, None without a project.
    """
    ctx.logger.info("Executing action: config.open_workspace")
    path = ctx.provider.open_workspace_config()
    if path is not None:
        ctx.open_file(path)
    return path
