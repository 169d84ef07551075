"""InventoryAgent — owns the registry and wires load events to scans."""

from __future__ import annotations

import structlog

from depsentinel.core.config import Settings
from depsentinel.engines.artifact_inventory.models import ArtifactRecord
from depsentinel.engines.artifact_inventory.registry import PathRegistry
from depsentinel.engines.artifact_inventory.resolver import MetadataResolver
from depsentinel.engines.artifact_inventory.scanner import InventoryScanner
from depsentinel.scheduler import ScanCallback, ScanLoop

logger = structlog.get_logger(__name__)


class InventoryAgent:
    """The hook-facing entry point of the dependency inventory.

    Built once at agent initialization. The hook layer calls
    :meth:`on_code_loaded` from application threads; the reporting layer
    either calls :meth:`scan` itself or starts the periodic loop with an
    ``on_scan`` callback.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        resolver: MetadataResolver | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.registry = PathRegistry(
            max_paths=self.settings.max_paths,
            archive_suffix=self.settings.archive_suffix,
        )
        self.scanner = InventoryScanner(self.registry, resolver or MetadataResolver())
        self._loop: ScanLoop | None = None

    @classmethod
    def from_env(cls) -> InventoryAgent:
        return cls(Settings.from_env())

    def on_code_loaded(self, location: str | None) -> None:
        """Load-event callback. Never performs I/O."""
        self.registry.register_code_source(location)

    def scan(self) -> set[ArtifactRecord]:
        return self.scanner.scan()

    def start(self, on_scan: ScanCallback | None = None) -> None:
        """Start periodic scanning every ``settings.scan_interval`` seconds."""
        if self._loop is None:
            self._loop = ScanLoop(self.scanner, self.settings.scan_interval, on_scan)
        elif on_scan is not None:
            self._loop.on_scan = on_scan
        self._loop.start()
        logger.info("agent.started", max_paths=self.settings.max_paths)

    def trigger_scan(self) -> None:
        """Ask the periodic loop for an immediate scan; no-op if not started."""
        if self._loop is not None:
            self._loop.trigger()

    def stop(self, timeout: float | None = None) -> None:
        if self._loop is not None:
            self._loop.stop(timeout)
        logger.info("agent.stopped", registered=self.registry.size())

    def __enter__(self) -> InventoryAgent:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
