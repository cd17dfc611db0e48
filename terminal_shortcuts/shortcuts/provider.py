"""
Action tree provider for the shortcuts panel.

This module keeps the merged catalog of global and workspace actions in
sync with the files on disk and answers the panel's child queries.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..core.models import Catalog, ConfigSource
from ..integrations.base import Notifier
from ..services.catalog_merger import merge_catalog
from ..services.config_store import ConfigStore
from ..services.config_watcher import ConfigWatcher, WatchHandle
from .nodes import (
    OPEN_GLOBAL_ACTION,
    OPEN_WORKSPACE_ACTION,
    NodeKind,
    TreeNode,
    config_button,
    group_node,
    leaf_node,
    separator,
)

RefreshListener = Callable[[], None]


class ActionTreeProvider:
    """Owns the catalog and the two file watches behind the panel."""

    def __init__(
        self,
        store: ConfigStore,
        watcher: ConfigWatcher,
        notifier: Notifier,
        logger: logging.Logger,
        global_config_path: Path,
        workspace_config_path: Optional[Path] = None,
    ):
        """
        Initializes the provider, creating the global file when missing.

        Args:
            store: Reads and creates action files
            watcher: Watches the action files for changes
            notifier: User-facing message surface
            logger: Application logger
            global_config_path: Path of the global action file
            workspace_config_path: Path of the workspace action file, None
                when no project is open
        """
        self.store = store
        self.watcher = watcher
        self.notifier = notifier
        self.logger = logger
        self.global_config_path = global_config_path
        self.workspace_config_path = workspace_config_path

        self.catalog: Catalog = {}
        self.global_watch: Optional[WatchHandle] = None
        self.workspace_watch: Optional[WatchHandle] = None
        self._listeners: List[RefreshListener] = []

        self.store.ensure(self.global_config_path, ConfigSource.GLOBAL.label)
        self.catalog = self._build_catalog()
        self.rearm()
        self.logger.info(f"Action tree provider initialized with {len(self.catalog)} groups.")

    # Catalog

    def _build_catalog(self) -> Catalog:
        global_entries = self.store.load(self.global_config_path)
        workspace_entries = []
        if self.workspace_config_path is not None and self.workspace_config_path.exists():
            workspace_entries = self.store.load(self.workspace_config_path, warn_missing=False)
        return merge_catalog(global_entries, workspace_entries)

    def reload(self) -> None:
        """Rebuild the catalog from both files and notify listeners."""
        self.catalog = self._build_catalog()
        self.logger.info(f"Reloaded actions: {sum(len(v) for v in self.catalog.values())} in {len(self.catalog)} groups")
        self._fire_refresh()

    # Refresh notifications

    def subscribe(self, listener: RefreshListener) -> Callable[[], None]:
        """
        Register a callback invoked with no arguments after every reload.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _fire_refresh(self) -> None:
        for listener in list(self._listeners):
            listener()

    # Watching

    def _on_file_changed(self, path: Path) -> None:
        self.logger.info(f"Action file changed: {path}")
        self.reload()

    def rearm(self) -> None:
        """(Re)start watching both action files that currently exist."""
        self.global_watch = self.watcher.arm(self.global_config_path, self._on_file_changed)
        if self.workspace_config_path is not None:
            self.workspace_watch = self.watcher.arm(self.workspace_config_path, self._on_file_changed)

    def ensure_config_file(self, path: Path, source: ConfigSource) -> bool:
        """Create an action file if needed, then start watching and showing it."""
        created = self.store.ensure(path, source.label)
        if created:
            self.rearm()
            self.reload()
        return created

    # Tree queries

    def get_children(self, node: Optional[TreeNode] = None) -> List[TreeNode]:
        if node is None:
            return [
                config_button(
                    "Open global config file...",
                    f"Open the global config file ({self.global_config_path})",
                    OPEN_GLOBAL_ACTION,
                ),
                config_button(
                    "Open workspace config file...",
                    f"Open the workspace config file ({self.workspace_config_path or 'no project open'})",
                    OPEN_WORKSPACE_ACTION,
                ),
                separator(),
                *(group_node(name, records) for name, records in self.catalog.items()),
            ]
        if node.kind is NodeKind.GROUP:
            return [leaf_node(record) for record in node.records]
        return []

    def leaves(self) -> List[Tuple[str, TreeNode]]:
        """All leaves in display order, paired with their group label."""
        result = []
        for node in self.get_children():
            if node.expandable:
                result.extend((node.label, leaf) for leaf in self.get_children(node))
        return result

    # Config buttons

    def open_global_config(self) -> Path:
        self.ensure_config_file(self.global_config_path, ConfigSource.GLOBAL)
        return self.global_config_path

    def open_workspace_config(self) -> Optional[Path]:
        if self.workspace_config_path is None:
            self.notifier.warning("No project is open, so there is no workspace config file.")
            return None
        self.ensure_config_file(self.workspace_config_path, ConfigSource.WORKSPACE)
        return self.workspace_config_path

    def dispose(self) -> None:
        for handle in (self.global_watch, self.workspace_watch):
            if handle is not None:
                handle.close()
        self.global_watch = None
        self.workspace_watch = None
        self._listeners.clear()
