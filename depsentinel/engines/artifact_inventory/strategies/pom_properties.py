"""Strategy reading the Maven-generated META-INF/**/pom.properties."""

from __future__ import annotations

from depsentinel.engines.artifact_inventory.archive import OpenedArchive, parse_properties
from depsentinel.engines.artifact_inventory.models import ArtifactRecord, ExtractionMethod


class PomPropertiesStrategy:
    extraction_method = ExtractionMethod.POM

    def extract(self, archive: OpenedArchive) -> ArtifactRecord | None:
        entry = self._find_entry(archive)
        if entry is None:
            return None

        props = parse_properties(archive.read(entry), entry)
        name = props.get("artifactId")
        version = props.get("version")
        if name is None or version is None:
            return None

        return ArtifactRecord(
            name=name,
            version=version,
            vendor=props.get("groupId"),
            source_path=archive.path,
            extraction_method=self.extraction_method,
        )

    @staticmethod
    def _find_entry(archive: OpenedArchive) -> str | None:
        """First pom.properties under META-INF, in archive order.

        Shaded jars carry one per bundled artifact; only the first counts.
        """
        for info in archive.entries():
            name = info.filename
            if (
                name.startswith("META-INF")
                and name.endswith("pom.properties")
                and not info.is_dir()
            ):
                return name
        return None
