"""
Domain models for action definitions.

An action file is a JSON array of objects shaped like `ActionRecord`. Both
the global and the workspace file share this schema.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_GROUP = "Default"
GLOBAL_CONFIG_FILE_NAME = "terminal-shortcuts-global.json"
WORKSPACE_CONFIG_FILE_NAME = "terminal-shortcuts-workspace.json"
WORKSPACE_CONFIG_DIR = ".vscode"


class ConfigSource(str, Enum):
    """Origin of a set of action definitions."""

    GLOBAL = "Global"
    WORKSPACE = "Workspace"

    @property
    def label(self) -> str:
        return self.value


class ActionRecord(BaseModel):
    """A single user-defined shell command."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str
    command: str
    terminal: Optional[str] = None
    group: str = DEFAULT_GROUP

    @field_validator("group", mode="before")
    @classmethod
    def _default_group(cls, value):
        # null, "" and whitespace all mean "no group"
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_GROUP
        return value

    @field_validator("terminal", mode="before")
    @classmethod
    def _blank_terminal(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def display_label(self) -> str:
        """Label shown in the panel, suffixed with the terminal name when set."""
        if self.terminal is not None:
            return f"{self.label} [{self.terminal}]"
        return self.label


# Group name -> actions, in first-seen order.
Catalog = Dict[str, List[ActionRecord]]


def global_config_path(storage_dir: Path) -> Path:
    return storage_dir / GLOBAL_CONFIG_FILE_NAME


def workspace_config_path(project_root: Path) -> Path:
    return project_root / WORKSPACE_CONFIG_DIR / WORKSPACE_CONFIG_FILE_NAME
