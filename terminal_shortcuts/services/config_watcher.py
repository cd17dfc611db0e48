from pathlib import Path
from typing import Callable, Dict, Optional, Tuple
import time

# (mtime_ns, size, inode)
Signature = Tuple[int, int, int]
ChangeCallback = Callable[[Path], None]


def _stat_signature(path: Path) -> Optional[Signature]:
    try:
        st = path.stat()
    except (FileNotFoundError, OSError):
        return None
    return (st.st_mtime_ns, st.st_size, st.st_ino)


class WatchHandle:
    """Observes one file for content changes."""

    def __init__(self, path: Path, callback: ChangeCallback):
        self.path = path
        self.callback = callback
        self.closed = False
        self._signature = _stat_signature(path)

    def check(self) -> bool:
        """
        Compare the file against the last seen state.

        Returns True only for a modification of a file that existed both
        before and after; appearing or disappearing just re-baselines.
        """
        if self.closed:
            return False
        current = _stat_signature(self.path)
        previous, self._signature = self._signature, current
        return previous is not None and current is not None and current != previous

    def close(self) -> None:
        self.closed = True


class ConfigWatcher:
    def __init__(self, logger, poll_interval: float = 1.0):
        self.logger = logger
        self.poll_interval = float(poll_interval)
        self._handles: Dict[Path, WatchHandle] = {}

    @property
    def handles(self) -> Dict[Path, WatchHandle]:
        return dict(self._handles)

    def arm(self, path: Path, callback: ChangeCallback) -> Optional[WatchHandle]:
        """
        Start watching `path`, replacing any earlier handle for it.

        Returns None without watching when the file does not exist; the
        caller re-arms once it has created the file.
        """
        previous = self._handles.pop(path, None)
        if previous is not None:
            previous.close()

        if not path.is_file():
            self.logger.debug(f"Not watching {path}: file does not exist")
            return None

        handle = WatchHandle(path, callback)
        self._handles[path] = handle
        self.logger.debug(f"Watching {path}")
        return handle

    def poll(self) -> int:
        """Check every handle once and run the callbacks of changed files."""
        fired = 0
        for handle in list(self._handles.values()):
            if not handle.check():
                continue
            self.logger.info(f"Detected change: {handle.path}")
            handle.callback(handle.path)
            fired += 1
        return fired

    def run(self, stop: Optional[Callable[[], bool]] = None) -> None:
        self.logger.info(
            f"Config watcher started: files={len(self._handles)} | poll_interval={self.poll_interval}s"
        )
        try:
            while stop is None or not stop():
                self.poll()
                time.sleep(self.poll_interval)
        except KeyboardInterrupt:
            self.logger.info("Config watcher stopped by user (Ctrl+C)")

    def close(self) -> None:
        for handle in self._handles.values():
            handle.close()
        self._handles.clear()
