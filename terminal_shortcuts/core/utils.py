"""
Shared utility functions for terminal-shortcuts.

This module contains common functionality that can be reused across
different components of the application.
"""

from pathlib import Path
from typing import Optional
import logging

import typer

PROJECT_MARKERS = (".vscode", ".git")


def ensure_directory_exists(
    path: Path, logger: Optional[logging.Logger] = None
) -> None:
    """
    Ensure that a directory exists, creating it if necessary.

    Args:
        path: Directory path to create
        logger: Optional logger for status messages
    """
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        if logger:
            logger.info(f"Created directory: {path}")
    elif logger:
        logger.debug(f"Directory already exists: {path}")


def find_project_root(start: Path, home: Optional[Path] = None) -> Optional[Path]:
    """
    Find the nearest directory at or above `start` that looks like a project.

    A directory counts as a project root when it contains a `.vscode` or
    `.git` entry. The search stops below the home directory, whose
    `~/.vscode` belongs to the editor rather than to a project.

    Args:
        start: Directory to start searching from
        home: Home directory, defaults to the current user's

    Returns:
        The project root, or None when no ancestor qualifies
    """
    start = start.resolve()
    home = (home or Path.home()).resolve()
    for candidate in (start, *start.parents):
        if candidate == home:
            break
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return None


def open_in_editor(path: Path, editor: Optional[str] = None) -> None:
    """
    Open a file in the user's editor and wait for it to close.

    Args:
        path: File to open
        editor: Editor command; defaults to $VISUAL / $EDITOR
    """
    typer.edit(filename=str(path), editor=editor)
