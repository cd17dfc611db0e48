"""terminal-shortcuts: grouped shell commands dispatched to named terminals."""

__version__ = "0.1.0"
