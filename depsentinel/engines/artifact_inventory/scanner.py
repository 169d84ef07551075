"""InventoryScanner — resolve every registered archive into a record set."""

from __future__ import annotations

import structlog

from depsentinel.engines.artifact_inventory.models import (
    ArtifactRecord,
    Resolution,
    ResolutionOutcome,
)
from depsentinel.engines.artifact_inventory.registry import PathRegistry
from depsentinel.engines.artifact_inventory.resolver import MetadataResolver
from depsentinel.exceptions import ArchiveOpenError

log = structlog.get_logger("depsentinel.engine")


class InventoryScanner:
    """Scan a registry snapshot, one path at a time.

    Paths whose file has disappeared are evicted from the registry; any
    other per-path failure is logged and the path is retried next scan.
    """

    def __init__(self, registry: PathRegistry, resolver: MetadataResolver | None = None) -> None:
        self._registry = registry
        self._resolver = resolver or MetadataResolver()

    def scan(self) -> set[ArtifactRecord]:
        """Return the deduplicated records for every resolvable registered path."""
        records: set[ArtifactRecord] = set()
        paths = self._registry.snapshot()
        evicted = failed = 0

        for path in paths:
            resolution = self._resolve_one(path)

            if resolution.outcome is ResolutionOutcome.RESOLVED:
                records.add(resolution.record)  # type: ignore[arg-type]
            elif resolution.outcome is ResolutionOutcome.ARCHIVE_MISSING:
                self._registry.remove(path)
                evicted += 1
                log.debug("inventory.path_evicted", path=path)
            elif resolution.outcome is ResolutionOutcome.ARCHIVE_ERROR:
                failed += 1
                if isinstance(resolution.error, ArchiveOpenError):
                    log.warning(
                        "inventory.archive_open_failed",
                        path=path,
                        error=str(resolution.error),
                    )

        log.info(
            "inventory.scan_completed",
            paths=len(paths),
            records=len(records),
            evicted=evicted,
            failed=failed,
        )
        return records

    def _resolve_one(self, path: str) -> Resolution:
        try:
            return self._resolver.try_resolve(path)
        except Exception as exc:
            # Keep one bad archive from taking down the whole scan.
            log.exception("inventory.resolve_crashed", path=path)
            return Resolution.failed(path, exc)
