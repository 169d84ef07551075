"""Extraction strategy interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from depsentinel.engines.artifact_inventory.archive import OpenedArchive
from depsentinel.engines.artifact_inventory.models import ArtifactRecord, ExtractionMethod


@runtime_checkable
class ExtractionStrategy(Protocol):
    """Interface that every metadata extraction strategy must satisfy.

    ``extract`` returns None when its source is absent or incomplete, and
    raises :class:`~depsentinel.exceptions.MetadataParseError` when the
    source is malformed.
    """

    extraction_method: ExtractionMethod

    def extract(self, archive: OpenedArchive) -> ArtifactRecord | None: ...
