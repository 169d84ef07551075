"""Path registry — bounded, thread-safe set of loaded archive paths."""

from __future__ import annotations

import threading
from urllib.parse import unquote, urlsplit

import structlog

from depsentinel.core.config import DEFAULT_ARCHIVE_SUFFIX, MAX_PATHS

log = structlog.get_logger("depsentinel.engine")


class PathRegistry:
    """Archive paths reported by load events, capped at ``max_paths``.

    Once full, new paths are dropped; existing entries are never displaced.
    All methods are safe to call from any thread without external locking.
    """

    def __init__(
        self,
        max_paths: int = MAX_PATHS,
        archive_suffix: str = DEFAULT_ARCHIVE_SUFFIX,
    ) -> None:
        self.max_paths = max_paths
        self.archive_suffix = archive_suffix
        self._paths: set[str] = set()
        self._lock = threading.Lock()
        self._full_logged = False

    def register(self, path: str | None) -> None:
        """Add *path* unless it is empty, not an archive, known, or the registry is full."""
        if not path or not path.endswith(self.archive_suffix):
            return
        with self._lock:
            if path in self._paths:
                return
            if len(self._paths) >= self.max_paths:
                first_drop = not self._full_logged
                self._full_logged = True
            else:
                self._paths.add(path)
                return
        if first_drop:
            log.warning("inventory.registry_full", max_paths=self.max_paths, dropped=path)

    def register_code_source(self, location: str | None) -> None:
        """Register the code-source location reported by the hook layer.

        *location* is either a filesystem path or a ``file:`` URL; other
        schemes (``jar:``, ``http:``, ...) are ignored.
        """
        if not location:
            return
        parts = urlsplit(location)
        if parts.scheme == "file":
            self.register(unquote(parts.path))
        elif not parts.scheme or len(parts.scheme) == 1:
            # No scheme, or a Windows drive letter.
            self.register(location)

    def remove(self, path: str) -> None:
        with self._lock:
            self._paths.discard(path)
            if len(self._paths) < self.max_paths:
                self._full_logged = False

    def snapshot(self) -> list[str]:
        """Return a sorted copy of the registered paths."""
        with self._lock:
            paths = list(self._paths)
        paths.sort()
        return paths

    def size(self) -> int:
        with self._lock:
            return len(self._paths)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._paths
