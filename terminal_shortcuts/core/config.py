"""
Configuration loading and management.

This module handles loading the tool's TOML settings file and validates it
against Pydantic models for type safety and consistency.
"""

import toml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from .config_models import AppConfig, APP_NAME
import collections.abc

import typer

CONFIG_FILE_NAME = "config.toml"
LOCAL_CONFIG_FILE_NAME = "config.local.toml"


def deep_merge(d: Dict[str, Any], u: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively update a dictionary.
    Sub-dictionaries are merged, and other values are overwritten.

    Args:
        d: Base dictionary to update
        u: Dictionary with updates

    Returns:
        Updated dictionary
    """
    for k, v in u.items():
        if isinstance(v, collections.abc.Mapping):
            d[k] = deep_merge(d.get(k, {}), v)
        else:
            d[k] = v
    return d


def app_dir() -> Path:
    """Per-user directory holding the settings file and the global action file."""
    return Path(typer.get_app_dir(APP_NAME))


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Loads configuration from TOML files and validates against Pydantic models.

    Without an explicit path, `config.toml` in the per-user app directory is
    used and its absence simply means built-in defaults. If a
    `config.local.toml` sits next to the settings file, its values are deeply
    merged into the base configuration, overriding any matching settings.

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig: The validated, typed configuration.

    Raises:
        FileNotFoundError: If an explicitly given config file does not exist.
        ValidationError: If configuration doesn't match expected schema.
    """
    logger = logging.getLogger("terminal_shortcuts")

    if config_path is None:
        config_path = app_dir() / CONFIG_FILE_NAME
        if not config_path.is_file():
            logger.debug(f"No settings file at {config_path}, using defaults")
            config: Dict[str, Any] = {}
        else:
            config = toml.load(config_path)
    else:
        if not config_path.is_file():
            raise FileNotFoundError(
                f"Configuration file not found at: {config_path.resolve()}"
            )
        config = toml.load(config_path)

    local_config_path = config_path.parent / LOCAL_CONFIG_FILE_NAME
    if local_config_path.is_file():
        logger.debug(f"Loading local configuration overrides from {local_config_path.resolve()}")
        local_config = toml.load(local_config_path)
        config = deep_merge(config, local_config)

    cfg = AppConfig.model_validate(config)
    cfg.paths = cfg.paths.expand()
    cfg.logging = cfg.logging.expand()
    return cfg
