from unittest.mock import MagicMock

from rich.console import Console

from terminal_shortcuts.ui import ConsoleNotifier, render_panel, watch_panel

from conftest import write_actions


def _render(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_render_panel_layout(make_provider, global_path):
    """Test that the rendered panel keeps the root order and numbers leaves"""
    write_actions(
        global_path,
        [
            {"label": "Build", "command": "make", "group": "Dev", "terminal": "build"},
            {"label": "Clean", "command": "make clean", "group": "Dev"},
            {"label": "Top", "command": "htop"},
        ],
    )
    provider = make_provider(with_workspace=False)

    text = _render(render_panel(provider))

    positions = [
        text.index("Open global config file..."),
        text.index("Open workspace config file..."),
        text.index("Dev"),
        text.index("1. ▶ Build [build]"),
        text.index("2. ▶ Clean"),
        text.index("Default"),
        text.index("3. ▶ Top"),
    ]
    assert positions == sorted(positions)
    assert "make clean" in text


def test_console_notifier_escapes_markup():
    """Test that messages with brackets are printed verbatim"""
    console = Console(record=True, width=100, color_system=None)
    notifier = ConsoleNotifier(console=console)

    notifier.info('Running command "echo [x]" in terminal "build".')
    notifier.warning("No action file found at /tmp/a.json.")
    notifier.error("Failed to parse a.json: boom")

    text = console.export_text()
    assert 'Running command "echo [x]" in terminal "build".' in text
    assert "No action file found" in text
    assert "Failed to parse a.json: boom" in text


def test_watch_panel_rerenders_on_refresh(make_provider):
    """Test that the live panel subscribes for refreshes while watching"""
    provider = make_provider(with_workspace=False)
    watcher = MagicMock()
    watcher.run.side_effect = lambda: provider.reload()
    console = Console(record=True, width=100, color_system=None)

    watch_panel(provider, watcher, console)

    watcher.run.assert_called_once()
    # The listener is removed once watching ends
    assert provider._listeners == []


def test_console_notifier_log_levels():
    """Test that warnings and errors are logged at their own level"""
    logger = MagicMock()
    notifier = ConsoleNotifier(console=Console(record=True, color_system=None), logger=logger)

    notifier.info("created")
    notifier.warning("No action file found")
    notifier.error("Failed to parse actions.json")

    logger.debug.assert_called_once_with("created")
    logger.warning.assert_called_once_with("No action file found")
    logger.error.assert_called_once_with("Failed to parse actions.json")
