"""
Action registry for discovering and loading action functions.

This module provides functionality to dynamically discover and load
action functions from the actions directory. Panel entries and CLI
commands refer to actions by their registered name.
"""

import importlib
import inspect
from pathlib import Path
from typing import Dict, Callable, Optional
import logging


def load_action_registry(
    logger: Optional[logging.Logger] = None,
) -> Dict[str, Callable]:
    """
    Scans the 'terminal_shortcuts/actions' directory to discover all actions.

    The registry maps action names in the format 'module_name.function_name'
    to the actual callable function. For example, `run()` in
    `terminal_shortcuts/actions/terminal.py` is registered as 'terminal.run'.
    Every action is called with the AppContext first, followed by the
    positional arguments of the activation.

    Args:
        logger: Optional logger for status messages

    Returns:
        dict: A dictionary mapping action names to action functions.
    """
    actions_dir = Path(__file__).parent
    action_registry: Dict[str, Callable] = {}

    if logger:
        logger.debug("Loading actions...")

    for f in sorted(actions_dir.glob("*.py")):
        if f.name.startswith("__") or f.stem == "registry":
            continue

        module_name = f.stem
        module_path = f"terminal_shortcuts.actions.{module_name}"

        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            if logger:
                logger.warning(f"Could not import action module {module_path}. Error: {e}")
            continue

        for name, func in inspect.getmembers(module, inspect.isfunction):
            # Skip private helpers and anything imported from elsewhere
            if name.startswith("_") or func.__module__ != module.__name__:
                continue
            action_name = f"{module_name}.{name}"
            action_registry[action_name] = func
            if logger:
                logger.debug(f"Discovered action: {action_name}")

    return action_registry
