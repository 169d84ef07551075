"""depsentinel: dependency inventory for a runtime security agent."""

__version__ = "0.1.0"

from depsentinel.agent import InventoryAgent
from depsentinel.core.config import MAX_PATHS, Settings
from depsentinel.engines.artifact_inventory import (
    ArtifactRecord,
    ExtractionMethod,
    InventoryScanner,
    MetadataResolver,
    PathRegistry,
)

__all__ = [
    "MAX_PATHS",
    "ArtifactRecord",
    "ExtractionMethod",
    "InventoryAgent",
    "InventoryScanner",
    "MetadataResolver",
    "PathRegistry",
    "Settings",
]
