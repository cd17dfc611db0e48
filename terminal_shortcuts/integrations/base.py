"""
Host capabilities consumed by the core.

The panel, the terminal backend and the message surface are reached only
through these narrow interfaces so that they can be swapped in tests.
"""

from typing import List, Optional, Protocol


class TerminalSession(Protocol):
    """A terminal the user can see and type into."""

    name: str

    def show(self) -> None:
        ...

    def send_text(self, text: str) -> None:
        """Submit `text` as one line of input."""
        ...


class TerminalHost(Protocol):
    """Lists, finds and creates terminal sessions."""

    def sessions(self) -> List[TerminalSession]:
        ...

    def active_session(self) -> Optional[TerminalSession]:
        ...

    def create_session(self, name: Optional[str] = None) -> TerminalSession:
        ...


class Notifier(Protocol):
    """User-facing messages."""

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...
