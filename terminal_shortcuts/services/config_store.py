"""
Reading, validating and creating action definition files.
"""

import json
import logging
from pathlib import Path
from typing import List, Tuple

from pydantic import ValidationError

from ..core.exceptions import ActionFileError
from ..core.models import ActionRecord
from ..core.utils import ensure_directory_exists
from ..integrations.base import Notifier


def default_actions(source_label: str) -> List[dict]:
    """Sample content written to a freshly created action file."""
    return [
        {
            "label": "Show Python version [edit me]",
            "command": "python --version",
            "group": source_label,
        },
        {
            "label": "Show Node.js version [edit me]",
            "command": "node --version",
            "group": source_label,
        },
    ]


def read_action_file(path: Path) -> List[ActionRecord]:
    """
    Parse an action file strictly.

    Args:
        path: JSON file holding an array of action objects

    Returns:
        The records in file order

    Raises:
        ActionFileError: If the content is not a JSON array of valid actions
        OSError: If the file cannot be read
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ActionFileError(path, str(e)) from e

    if not isinstance(data, list):
        raise ActionFileError(path, f"expected a JSON array, got {type(data).__name__}")

    records = []
    for index, item in enumerate(data):
        try:
            records.append(ActionRecord.model_validate(item))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'entry'}: {err['msg']}" for err in e.errors()
            )
            raise ActionFileError(path, f"entry {index}: {problems}") from e
    return records


class ConfigStore:
    """Loads action files and creates them with sample content on demand."""

    def __init__(self, notifier: Notifier, logger: logging.Logger):
        self.notifier = notifier
        self.logger = logger

    def ensure(self, path: Path, source_label: str) -> bool:
        """
        Create `path` with two sample actions if it does not exist yet.

        Args:
            path: Action file to create
            source_label: Group name given to the sample actions

        Returns:
            True if the file was created, False if it already existed
        """
        if path.exists():
            return False

        ensure_directory_exists(path.parent, self.logger)
        path.write_text(json.dumps(default_actions(source_label), indent=4), encoding="utf-8")
        self.logger.info(f"Created {source_label.lower()} action file {path}")
        self.notifier.info(f"{source_label} {path.name} file created in {path.parent}.")
        return True

    def load(self, path: Path, warn_missing: bool = True) -> List[Tuple[str, ActionRecord]]:
        """
        Load the actions of one file, paired with their group names.

        Missing or malformed files are reported to the user and yield an
        empty list; they never raise.

        Args:
            path: Action file to read
            warn_missing: Show a warning when the file does not exist

        Returns:
            (group, record) pairs in file order
        """
        if not path.is_file():
            self.logger.debug(f"Action file not found: {path}")
            if warn_missing:
                self.notifier.warning(f"No action file found at {path}.")
            return []

        try:
            records = read_action_file(path)
        except ActionFileError as e:
            self.logger.error(f"Failed to parse {e.path}: {e.message}")
            self.notifier.error(f"Failed to parse {e.path.name}: {e.message}")
            return []
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read {path}: {e}")
            self.notifier.error(f"Failed to read {path.name}: {e}")
            return []

        self.logger.debug(f"Loaded {len(records)} actions from {path}")
        return [(record.group, record) for record in records]
