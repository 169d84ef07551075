"""ScanLoop — periodic inventory scans on a dedicated thread."""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from depsentinel.engines.artifact_inventory.models import ArtifactRecord
from depsentinel.engines.artifact_inventory.scanner import InventoryScanner

logger = structlog.get_logger(__name__)

ScanCallback = Callable[[set[ArtifactRecord]], None]


class ScanLoop:
    """Scanning loop with trigger/timeout wake mechanism.

    Each cycle waits up to ``interval`` seconds (or until :meth:`trigger`),
    scans, and hands the records to ``on_scan``.
    """

    def __init__(
        self,
        scanner: InventoryScanner,
        interval: float,
        on_scan: ScanCallback | None = None,
        name: str = "depsentinel-inventory",
    ) -> None:
        self.scanner = scanner
        self.interval = interval
        self.on_scan = on_scan
        self.name = name
        self._trigger = threading.Event()
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, scan_immediately: bool = True) -> None:
        """Start the loop thread. No-op if already running."""
        if self.running:
            return
        self._stopping.clear()
        if scan_immediately:
            self._trigger.set()
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
        logger.info("scan_loop.started", interval=self.interval)

    def trigger(self) -> None:
        """Wake the loop for an immediate scan."""
        self._trigger.set()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to exit and wait for the thread."""
        self._stopping.set()
        self._trigger.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                # Still mid-scan; the thread exits once that scan returns.
                logger.warning("scan_loop.stop_timed_out", timeout=timeout)
                return
            self._thread = None
        logger.info("scan_loop.stopped")

    def run_once(self) -> set[ArtifactRecord]:
        records = self.scanner.scan()
        if self.on_scan is not None:
            self.on_scan(records)
        return records

    def _loop(self) -> None:
        while True:
            self._trigger.wait(timeout=self.interval)
            self._trigger.clear()
            if self._stopping.is_set():
                return
            try:
                records = self.run_once()
                logger.debug("scan_loop.cycle", records=len(records))
            except Exception:
                logger.exception("scan_loop.error")
