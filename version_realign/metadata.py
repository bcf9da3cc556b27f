"""Sources of already-published versions.

Fetching metadata from remote repositories is outside this package: a
source only hands over version lists that are already available, either in
memory or as maven-metadata.xml files laid out like a local repository.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from .errors import MetadataUnavailable
from .models import Coordinate

METADATA_FILENAME = "maven-metadata.xml"


class MetadataSource(Protocol):
    """Anything that can list the published versions of a coordinate."""

    def versions(self, coordinate: Coordinate) -> Iterable[str]:
        """Return known versions; raise MetadataUnavailable if they can't be read."""
        ...


class StaticMetadata:
    """Published versions held in memory."""

    def __init__(self, versions: Mapping[Coordinate, Iterable[str]]) -> None:
        self._versions = {coordinate: tuple(vs) for coordinate, vs in versions.items()}

    def versions(self, coordinate: Coordinate) -> Iterable[str]:
        return self._versions.get(coordinate, ())


class LocalRepositoryMetadata:
    """Reads maven-metadata.xml files from a repository directory.

    The file for ``org.example:lib`` is expected at
    ``<root>/org/example/lib/maven-metadata.xml``. A missing file means the
    coordinate has never been published.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def metadata_path(self, coordinate: Coordinate) -> Path:
        return (
            self.root.joinpath(*coordinate.group_id.split("."))
            / coordinate.artifact_id
            / METADATA_FILENAME
        )

    def versions(self, coordinate: Coordinate) -> Iterable[str]:
        path = self.metadata_path(coordinate)
        if not path.exists():
            return []
        try:
            text = path.read_text()
        except OSError as exc:
            raise MetadataUnavailable(coordinate, str(exc)) from exc
        try:
            return parse_maven_metadata(text)
        except ET.ParseError as exc:
            raise MetadataUnavailable(coordinate, f"malformed {path.name}: {exc}") from exc


def parse_maven_metadata(text: str) -> list[str]:
    """Extract versioning/versions/version entries from maven-metadata.xml.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not valid XML.
    """
    root = ET.fromstring(text)
    # Repository managers may declare a default namespace on <metadata>
    ns = root.tag[: root.tag.index("}") + 1] if root.tag.startswith("{") else ""
    versions: list[str] = []

    versioning = root.find(f"{ns}versioning")
    if versioning is not None:
        versions_elem = versioning.find(f"{ns}versions")
        if versions_elem is not None:
            for version_elem in versions_elem.findall(f"{ns}version"):
                if version_elem.text and version_elem.text.strip():
                    versions.append(version_elem.text.strip())
    return versions
