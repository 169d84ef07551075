"""Tests for ScanLoop."""

from __future__ import annotations

import threading
from unittest.mock import MagicMock

from depsentinel.engines.artifact_inventory.models import ArtifactRecord, ExtractionMethod
from depsentinel.engines.artifact_inventory.scanner import InventoryScanner
from depsentinel.scheduler import ScanLoop

RECORD = ArtifactRecord("foo", "1.0", None, "/lib/foo.jar", ExtractionMethod.POM)


def _fake_scanner() -> MagicMock:
    scanner = MagicMock(spec=InventoryScanner)
    scanner.scan.return_value = {RECORD}
    return scanner


class _Collector:
    """on_scan callback that counts deliveries."""

    def __init__(self, fail_first: bool = False) -> None:
        self.results: list[set[ArtifactRecord]] = []
        self.fail_first = fail_first
        self._cond = threading.Condition()

    def __call__(self, records: set[ArtifactRecord]) -> None:
        with self._cond:
            self.results.append(records)
            self._cond.notify_all()
        if self.fail_first and len(self.results) == 1:
            raise RuntimeError("telemetry down")

    def wait_for(self, count: int, timeout: float = 5.0) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: len(self.results) >= count, timeout)


class TestScanLoop:
    def test_run_once_delivers(self):
        collector = _Collector()
        loop = ScanLoop(_fake_scanner(), interval=3600, on_scan=collector)
        assert loop.run_once() == {RECORD}
        assert collector.results == [{RECORD}]

    def test_start_scans_immediately(self):
        collector = _Collector()
        loop = ScanLoop(_fake_scanner(), interval=3600, on_scan=collector)
        loop.start()
        try:
            assert collector.wait_for(1)
        finally:
            loop.stop(timeout=5)
        assert not loop.running

    def test_trigger_wakes_loop(self):
        collector = _Collector()
        loop = ScanLoop(_fake_scanner(), interval=3600, on_scan=collector)
        loop.start(scan_immediately=False)
        try:
            loop.trigger()
            assert collector.wait_for(1)
            loop.trigger()
            assert collector.wait_for(2)
        finally:
            loop.stop(timeout=5)

    def test_interval_elapses(self):
        collector = _Collector()
        loop = ScanLoop(_fake_scanner(), interval=0.01, on_scan=collector)
        loop.start(scan_immediately=False)
        try:
            assert collector.wait_for(2)
        finally:
            loop.stop(timeout=5)

    def test_callback_error_does_not_kill_loop(self):
        collector = _Collector(fail_first=True)
        loop = ScanLoop(_fake_scanner(), interval=3600, on_scan=collector)
        loop.start()
        try:
            assert collector.wait_for(1)
            loop.trigger()
            assert collector.wait_for(2)
            assert loop.running
        finally:
            loop.stop(timeout=5)

    def test_stop_without_start(self):
        loop = ScanLoop(_fake_scanner(), interval=1)
        loop.stop()
        assert not loop.running

    def test_start_twice_is_noop(self):
        loop = ScanLoop(_fake_scanner(), interval=3600)
        loop.start(scan_immediately=False)
        thread = loop._thread
        try:
            loop.start(scan_immediately=False)
            assert loop._thread is thread
        finally:
            loop.stop(timeout=5)

    def test_stop_timeout_keeps_running_thread(self):
        release = threading.Event()
        entered = threading.Event()

        def _slow_scan(records):
            entered.set()
            release.wait(5)

        loop = ScanLoop(_fake_scanner(), interval=3600, on_scan=_slow_scan)
        loop.start()
        try:
            assert entered.wait(5)
            thread = loop._thread
            loop.stop(timeout=0.05)
            assert loop.running
            loop.start()
            assert loop._thread is thread
        finally:
            release.set()
            loop.stop(timeout=5)
        assert not loop.running
