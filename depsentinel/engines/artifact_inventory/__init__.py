"""Artifact inventory engine — identify the archives a process has loaded."""

from depsentinel.engines.artifact_inventory.models import (
    ArtifactRecord,
    ExtractionMethod,
    Resolution,
    ResolutionOutcome,
)
from depsentinel.engines.artifact_inventory.registry import PathRegistry
from depsentinel.engines.artifact_inventory.resolver import MetadataResolver
from depsentinel.engines.artifact_inventory.scanner import InventoryScanner

__all__ = [
    "ArtifactRecord",
    "ExtractionMethod",
    "InventoryScanner",
    "MetadataResolver",
    "PathRegistry",
    "Resolution",
    "ResolutionOutcome",
]
