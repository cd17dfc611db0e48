import json
import logging
from pathlib import Path
from typing import List, Optional

import pytest

from terminal_shortcuts.services.config_store import ConfigStore
from terminal_shortcuts.services.config_watcher import ConfigWatcher
from terminal_shortcuts.shortcuts.provider import ActionTreeProvider


class FakeSession:
    def __init__(self, name: str, active: bool = False):
        self.name = name
        self.active = active
        self.shown = 0
        self.sent: List[str] = []

    def show(self) -> None:
        self.shown += 1

    def send_text(self, text: str) -> None:
        self.sent.append(text)


class FakeTerminalHost:
    """In-memory terminal host; unnamed sessions are called 'shell'."""

    def __init__(self, sessions: Optional[List[FakeSession]] = None):
        self._sessions = list(sessions or [])
        self.created: List[FakeSession] = []

    def sessions(self) -> List[FakeSession]:
        return list(self._sessions)

    def active_session(self) -> Optional[FakeSession]:
        return next((s for s in self._sessions if s.active), None)

    def create_session(self, name: Optional[str] = None) -> FakeSession:
        session = FakeSession(name or "shell")
        self._sessions.append(session)
        self.created.append(session)
        return session


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def of(self, level: str) -> List[str]:
        return [m for lvl, m in self.messages if lvl == level]


def write_actions(path: Path, actions) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(actions), encoding="utf-8")
    return path


@pytest.fixture
def logger():
    return logging.getLogger("terminal_shortcuts.tests")


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store(notifier, logger):
    return ConfigStore(notifier, logger)


@pytest.fixture
def watcher(logger):
    w = ConfigWatcher(logger, poll_interval=0.01)
    yield w
    w.close()


@pytest.fixture
def global_path(tmp_path):
    return tmp_path / "storage" / "terminal-shortcuts-global.json"


@pytest.fixture
def workspace_path(tmp_path):
    return tmp_path / "project" / ".vscode" / "terminal-shortcuts-workspace.json"


@pytest.fixture
def make_provider(store, watcher, notifier, logger, global_path, workspace_path):
    created = []

    def _make(with_workspace: bool = True) -> ActionTreeProvider:
        provider = ActionTreeProvider(
            store,
            watcher,
            notifier,
            logger,
            global_path,
            workspace_path if with_workspace else None,
        )
        created.append(provider)
        return provider

    yield _make
    for provider in created:
        provider.dispose()
