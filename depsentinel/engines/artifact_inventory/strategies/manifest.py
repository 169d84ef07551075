"""Strategies reading main attributes of META-INF/MANIFEST.MF."""

from __future__ import annotations

from dataclasses import dataclass

from depsentinel.engines.artifact_inventory.archive import OpenedArchive
from depsentinel.engines.artifact_inventory.models import ArtifactRecord, ExtractionMethod


@dataclass(frozen=True)
class ManifestAttributeStrategy:
    """Build a record from one title/version/vendor attribute family.

    ``vendor_keys`` are tried in order; the first present value wins, even
    if empty. Values are used exactly as written in the manifest.
    """

    extraction_method: ExtractionMethod
    title_key: str
    version_key: str
    vendor_keys: tuple[str, ...]

    def extract(self, archive: OpenedArchive) -> ArtifactRecord | None:
        attributes = archive.manifest()
        if attributes is None:
            return None

        name = attributes.get(self.title_key)
        version = attributes.get(self.version_key)
        if name is None or version is None:
            return None

        vendor = None
        for key in self.vendor_keys:
            vendor = attributes.get(key)
            if vendor is not None:
                break

        return ArtifactRecord(
            name=name,
            version=version,
            vendor=vendor,
            source_path=archive.path,
            extraction_method=self.extraction_method,
        )


IMPLEMENTATION = ManifestAttributeStrategy(
    extraction_method=ExtractionMethod.MANIFEST_IMPLEMENTATION,
    title_key="implementation-title",
    version_key="implementation-version",
    vendor_keys=("implementation-vendor-id", "implementation-vendor"),
)

SPECIFICATION = ManifestAttributeStrategy(
    extraction_method=ExtractionMethod.MANIFEST_SPECIFICATION,
    title_key="specification-title",
    version_key="specification-version",
    vendor_keys=("specification-vendor",),
)

BUNDLE = ManifestAttributeStrategy(
    extraction_method=ExtractionMethod.MANIFEST_BUNDLE,
    title_key="bundle-symbolicname",
    version_key="bundle-version",
    vendor_keys=("bundle-vendor",),
)
