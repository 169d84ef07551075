"""Data models for the artifact inventory engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ExtractionMethod(Enum):
    """Which metadata source produced a record."""

    POM = "pom"
    MANIFEST_IMPLEMENTATION = "manifest_implementation"
    MANIFEST_SPECIFICATION = "manifest_specification"
    MANIFEST_BUNDLE = "manifest_bundle"


class ResolutionOutcome(Enum):
    RESOLVED = "resolved"
    NO_METADATA = "no_metadata"
    ARCHIVE_MISSING = "archive_missing"
    ARCHIVE_ERROR = "archive_error"


@dataclass(frozen=True)
class ArtifactRecord:
    """Identity of one loaded archive.

    Equality and hashing cover the identity fields and the extraction
    method, so two records that differ only in ``extraction_method`` are
    distinct, while the same jar loaded from two locations collapses to one
    record. ``source_path`` is carried along but not compared.
    """

    name: str
    version: str
    vendor: str | None
    source_path: str = field(compare=False)
    extraction_method: ExtractionMethod

    def to_dict(self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "version": self.version,
            "vendor": self.vendor,
            "source_path": self.source_path,
            "extraction_method": self.extraction_method.value,
        }


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a single archive path."""

    path: str
    outcome: ResolutionOutcome
    record: ArtifactRecord | None = None
    error: Exception | None = None

    @classmethod
    def resolved(cls, path: str, record: ArtifactRecord) -> Resolution:
        return cls(path=path, outcome=ResolutionOutcome.RESOLVED, record=record)

    @classmethod
    def no_metadata(cls, path: str) -> Resolution:
        return cls(path=path, outcome=ResolutionOutcome.NO_METADATA)

    @classmethod
    def missing(cls, path: str, error: Exception) -> Resolution:
        return cls(path=path, outcome=ResolutionOutcome.ARCHIVE_MISSING, error=error)

    @classmethod
    def failed(cls, path: str, error: Exception) -> Resolution:
        return cls(path=path, outcome=ResolutionOutcome.ARCHIVE_ERROR, error=error)
