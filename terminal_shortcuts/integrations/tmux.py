"""
tmux terminal backend.

Every window of one dedicated tmux session is a terminal session. Windows
are addressed by their tmux window id, and their window name is the
terminal name actions refer to.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from ..core.exceptions import TerminalError

WINDOW_FORMAT = "#{window_id}\t#{window_name}\t#{window_active}"


@dataclass
class TmuxWindow:
    """A tmux window acting as a terminal session."""

    host: "TmuxTerminalHost"
    window_id: str
    name: str
    active: bool = False

    def show(self) -> None:
        self.host.tmux(["select-window", "-t", self.window_id])

    def send_text(self, text: str) -> None:
        # -l sends the text literally, Enter submits it
        self.host.tmux(["send-keys", "-t", self.window_id, "-l", text])
        self.host.tmux(["send-keys", "-t", self.window_id, "Enter"])


class TmuxTerminalHost:
    """Terminal host backed by the windows of a tmux session."""

    def __init__(self, session_name: str, logger: logging.Logger, binary: str = "tmux"):
        self.session_name = session_name
        self.logger = logger
        self.binary = binary

    def _run(self, args: List[str], timeout: int = 10) -> subprocess.CompletedProcess:
        if shutil.which(self.binary) is None:
            raise TerminalError(f"{self.binary} is not installed or not on PATH")
        try:
            return subprocess.run(
                [self.binary, *args],
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise TerminalError(f"tmux {args[0]} failed: {e}") from e

    def tmux(self, args: List[str], timeout: int = 10) -> str:
        """Run a tmux command and return its stdout, raising on failure."""
        self.logger.debug(f"tmux {' '.join(args)}")
        proc = self._run(args, timeout=timeout)
        if proc.returncode != 0:
            message = (proc.stderr or proc.stdout or "").strip() or f"exit code {proc.returncode}"
            raise TerminalError(f"tmux {args[0]} failed: {message}")
        return proc.stdout

    def has_session(self) -> bool:
        return self._run(["has-session", "-t", f"={self.session_name}"], timeout=5).returncode == 0

    def _parse_window(self, line: str) -> TmuxWindow:
        window_id, name, active = line.split("\t", 2)
        return TmuxWindow(self, window_id, name, active.strip() == "1")

    def sessions(self) -> List[TmuxWindow]:
        if not self.has_session():
            return []
        out = self.tmux(["list-windows", "-t", f"={self.session_name}", "-F", WINDOW_FORMAT])
        return [self._parse_window(line) for line in out.splitlines() if line.strip()]

    def active_session(self) -> Optional[TmuxWindow]:
        return next((w for w in self.sessions() if w.active), None)

    def create_session(self, name: Optional[str] = None) -> TmuxWindow:
        if self.has_session():
            args = ["new-window", "-t", f"={self.session_name}:", "-P", "-F", WINDOW_FORMAT]
        else:
            args = ["new-session", "-d", "-s", self.session_name, "-P", "-F", WINDOW_FORMAT]
        if name:
            args += ["-n", name]

        out = self.tmux(args)
        window = self._parse_window(out.strip().splitlines()[0])
        self.logger.info(f"Created tmux window {window.window_id} ({window.name}) in session {self.session_name}")
        return window
