"""Metadata extraction strategies, in precedence order."""

from depsentinel.engines.artifact_inventory.strategies.base import ExtractionStrategy
from depsentinel.engines.artifact_inventory.strategies.manifest import (
    BUNDLE,
    IMPLEMENTATION,
    SPECIFICATION,
    ManifestAttributeStrategy,
)
from depsentinel.engines.artifact_inventory.strategies.pom_properties import PomPropertiesStrategy

DEFAULT_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    PomPropertiesStrategy(),
    IMPLEMENTATION,
    SPECIFICATION,
    BUNDLE,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "ExtractionStrategy",
    "ManifestAttributeStrategy",
    "PomPropertiesStrategy",
]
