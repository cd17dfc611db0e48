"""
Custom exceptions for terminal-shortcuts.

This module defines application-specific exceptions for better error handling
and more meaningful error messages.
"""

from pathlib import Path


class TerminalShortcutsError(Exception):
    """Base exception for all terminal-shortcuts errors."""

    pass


class ConfigurationError(TerminalShortcutsError):
    """Raised when the tool's own settings cannot be loaded or parsed."""

    pass


class ActionFileError(TerminalShortcutsError):
    """Raised when an action definition file is malformed."""

    def __init__(self, path: Path, message: str):
        super().__init__(message)
        self.path = path
        self.message = message


class ActionNotFoundError(TerminalShortcutsError, ValueError):
    """Raised when a requested action is not found in the registry."""

    pass


class TerminalError(TerminalShortcutsError):
    """Raised when the terminal backend cannot be reached or refuses a command."""

    pass
