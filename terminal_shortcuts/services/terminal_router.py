"""
Routing a command to the terminal it should run in.
"""

import logging
from typing import Optional

from ..integrations.base import Notifier, TerminalHost, TerminalSession


class TerminalRouter:
    """Resolves a live or new terminal for an action and sends it the command."""

    def __init__(self, host: TerminalHost, notifier: Notifier, logger: logging.Logger):
        self.host = host
        self.notifier = notifier
        self.logger = logger

    def resolve(self, terminal_name: Optional[str] = None) -> TerminalSession:
        """
        Pick the terminal a command should run in.

        A named terminal is reused when one with exactly that name exists and
        created otherwise. Without a name, the active terminal is used, or a
        new default one when there is none.
        """
        if terminal_name is not None:
            existing = next((s for s in self.host.sessions() if s.name == terminal_name), None)
            if existing is not None:
                return existing
            self.logger.debug(f"No terminal named '{terminal_name}', creating one")
            return self.host.create_session(terminal_name)

        active = self.host.active_session()
        if active is not None:
            return active
        self.logger.debug("No active terminal, creating a default one")
        return self.host.create_session()

    def dispatch(self, command: str, terminal_name: Optional[str] = None) -> TerminalSession:
        """
        Show the resolved terminal and submit `command` to it.

        Args:
            command: Shell command text, sent as one line
            terminal_name: Optional terminal to route to

        Returns:
            The terminal the command was sent to
        """
        session = self.resolve(terminal_name)
        session.show()
        session.send_text(command)

        self.logger.info(f"Sent '{command}' to terminal '{session.name}'")
        self.notifier.info(f'Running command "{command}" in terminal "{session.name}".')
        return session
