"""
Pydantic configuration models for terminal-shortcuts.

These models describe the tool's own settings file (config.toml), not the
action definition files the panel is built from.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

APP_NAME = "terminal-shortcuts"


class PathsConfig(BaseModel):
    """File system locations."""
    global_storage_dir: Optional[Path] = None
    workspace_root: Optional[Path] = None

    def expand(self):
        """Expand user paths to absolute paths."""
        if self.global_storage_dir:
            self.global_storage_dir = self.global_storage_dir.expanduser()
        if self.workspace_root:
            self.workspace_root = self.workspace_root.expanduser()
        return self


class WatcherConfig(BaseModel):
    """Config file watcher configuration."""
    poll_interval_seconds: float = Field(1.0, gt=0)


class TerminalConfig(BaseModel):
    """Terminal backend configuration."""
    tmux_session: str = Field(APP_NAME, min_length=1)


class EditorConfig(BaseModel):
    """Editor used to open the config files. Falls back to $EDITOR."""
    command: Optional[str] = None


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[Path] = None
    enable_file_logging: bool = False

    def expand(self):
        """Expand user paths to absolute paths."""
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


class AppConfig(BaseModel):
    """Root configuration model."""
    paths: PathsConfig = PathsConfig()
    watcher: WatcherConfig = WatcherConfig()
    terminal: TerminalConfig = TerminalConfig()
    editor: EditorConfig = EditorConfig()
    logging: LoggingConfig = LoggingConfig()
