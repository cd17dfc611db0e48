"""
Application Context for managing shared state and dependencies.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import app_dir, load_config
from .logging import setup_logging
from .exceptions import ActionNotFoundError, ConfigurationError
from .config_models import AppConfig
from .models import global_config_path, workspace_config_path
from .utils import find_project_root, open_in_editor
from ..integrations.base import Notifier, TerminalHost


class AppContext:
    """
    Central application context that owns configuration, logging, the
    shortcuts panel provider, the terminal router and the action registry.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        workspace_root: Optional[Path] = None,
        use_workspace: bool = True,
        terminal_host: Optional[TerminalHost] = None,
        notifier: Optional[Notifier] = None,
        editor: Optional[Callable[[Path], None]] = None,
    ):
        """
        Initialize the application context.

        Args:
            config_path: Optional path to the settings file
            workspace_root: Project root holding the workspace action file;
                discovered from the current directory when not given
            use_workspace: Disable the workspace action file entirely
            terminal_host: Terminal backend, tmux by default
            notifier: User message surface, the console by default
            editor: Callable opening a file, the user's editor by default

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        self.config_path = config_path

        try:
            self.config: AppConfig = load_config(config_path)
        except Exception as e:
            raise ConfigurationError(str(e)) from e

        log_file = None
        if self.config.logging.enable_file_logging:
            log_file = self.config.logging.log_file or app_dir() / "terminal-shortcuts.log"
        self.logger = setup_logging(level=self.config.logging.level, log_file=log_file)

        # Imported here to keep core importable without the UI and services
        from ..ui import ConsoleNotifier
        from ..integrations.tmux import TmuxTerminalHost
        from ..services.config_store import ConfigStore
        from ..services.config_watcher import ConfigWatcher
        from ..services.terminal_router import TerminalRouter
        from ..shortcuts.provider import ActionTreeProvider

        self.notifier: Notifier = notifier or ConsoleNotifier(logger=self.logger)
        self.terminal_host: TerminalHost = terminal_host or TmuxTerminalHost(
            self.config.terminal.tmux_session, self.logger
        )
        self._editor = editor

        storage_dir = self.config.paths.global_storage_dir or app_dir()
        self.workspace_root: Optional[Path] = None
        if use_workspace:
            self.workspace_root = (
                workspace_root or self.config.paths.workspace_root or find_project_root(Path.cwd())
            )

        self.watcher = ConfigWatcher(self.logger, self.config.watcher.poll_interval_seconds)
        self.provider = ActionTreeProvider(
            ConfigStore(self.notifier, self.logger),
            self.watcher,
            self.notifier,
            self.logger,
            global_config_path(storage_dir),
            workspace_config_path(self.workspace_root) if self.workspace_root else None,
        )
        self.router = TerminalRouter(self.terminal_host, self.notifier, self.logger)

        self.action_registry: Dict[str, Callable] = {}
        self._load_action_registry()

        self.logger.info("Configuration loaded successfully")

    def _load_action_registry(self) -> None:
        from ..actions.registry import load_action_registry

        self.action_registry = load_action_registry(self.logger)

    def get_action(self, action_name: str) -> Optional[Callable]:
        return self.action_registry.get(action_name)

    def execute_action(self, action_name: str, *args: Any) -> Any:
        """
        Execute a registered action with the context and positional arguments.

        Raises:
            ActionNotFoundError: If no action is registered under the name
        """
        action = self.get_action(action_name)
        if action is None:
            raise ActionNotFoundError(f"Action '{action_name}' not found in registry")

        self.logger.info(f"Executing action: {action_name}")
        try:
            return action(self, *args)
        except Exception as e:
            self.logger.error(f"Action '{action_name}' failed: {e}")
            raise

    def open_file(self, path: Path) -> None:
        if self._editor is not None:
            self._editor(path)
        else:
            open_in_editor(path, self.config.editor.command)

    def close(self) -> None:
        self.provider.dispose()
        self.watcher.close()
