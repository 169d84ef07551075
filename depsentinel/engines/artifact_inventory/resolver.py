"""MetadataResolver — turn one archive path into an ArtifactRecord."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from depsentinel.engines.artifact_inventory.archive import OpenedArchive
from depsentinel.engines.artifact_inventory.models import ArtifactRecord, Resolution
from depsentinel.engines.artifact_inventory.strategies import (
    DEFAULT_STRATEGIES,
    ExtractionStrategy,
)
from depsentinel.exceptions import (
    ArchiveMissingError,
    ArchiveOpenError,
    MetadataParseError,
    ResourceCloseError,
)

log = structlog.get_logger("depsentinel.engine")


class MetadataResolver:
    """Apply extraction strategies in order; the first record wins."""

    def __init__(self, strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES) -> None:
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[ExtractionStrategy, ...]:
        return self._strategies

    def resolve(self, archive_path: str) -> ArtifactRecord | None:
        """Resolve *archive_path*, or return None if no strategy matches.

        Raises :class:`ArchiveMissingError` when the file no longer exists
        and :class:`ArchiveOpenError` when it cannot be opened as a zip.
        Any failure while a strategy reads or parses its source only
        disqualifies that strategy.
        """
        archive = OpenedArchive.open(archive_path)
        try:
            return self._apply_strategies(archive)
        finally:
            self._close(archive)

    def try_resolve(self, archive_path: str) -> Resolution:
        """Like :meth:`resolve`, but report failures as a :class:`Resolution`."""
        try:
            record = self.resolve(archive_path)
        except ArchiveMissingError as exc:
            return Resolution.missing(archive_path, exc)
        except ArchiveOpenError as exc:
            return Resolution.failed(archive_path, exc)
        if record is None:
            return Resolution.no_metadata(archive_path)
        return Resolution.resolved(archive_path, record)

    def _apply_strategies(self, archive: OpenedArchive) -> ArtifactRecord | None:
        for strategy in self._strategies:
            method = strategy.extraction_method.value
            try:
                record = strategy.extract(archive)
            except MetadataParseError as exc:
                log.warning(
                    "inventory.strategy_failed",
                    path=archive.path,
                    strategy=method,
                    error=str(exc),
                )
                continue
            except Exception as exc:
                log.warning(
                    "inventory.strategy_failed",
                    path=archive.path,
                    strategy=method,
                    error=str(exc) or type(exc).__name__,
                    exc_info=True,
                )
                continue
            if record is not None:
                log.debug("inventory.resolved", path=archive.path, strategy=method)
                return record
        return None

    @staticmethod
    def _close(archive: OpenedArchive) -> None:
        try:
            archive.close()
        except ResourceCloseError as exc:
            log.warning(
                "inventory.archive_close_failed",
                path=archive.path,
                error=exc.reason,
                exc_info=True,
            )
