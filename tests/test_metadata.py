"""Tests for version_realign.metadata."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from conftest import metadata_xml
from version_realign.errors import MetadataUnavailable
from version_realign.metadata import (
    LocalRepositoryMetadata,
    StaticMetadata,
    parse_maven_metadata,
)
from version_realign.models import Coordinate

CORE = Coordinate(group_id="org.example", artifact_id="core")


class TestParseMavenMetadata:
    def test_versions_listed(self) -> None:
        text = metadata_xml("1.0.0", "1.0.0.rebuild-1")
        assert parse_maven_metadata(text) == ["1.0.0", "1.0.0.rebuild-1"]

    def test_default_namespace(self) -> None:
        text = (
            '<metadata xmlns="http://maven.apache.org/METADATA/1.1.0" modelVersion="1.1.0">'
            "<groupId>org.example</groupId><artifactId>core</artifactId>"
            "<versioning><versions>"
            "<version>1.2.0</version><version>1.2.0.rebuild-1</version>"
            "</versions></versioning></metadata>"
        )
        assert parse_maven_metadata(text) == ["1.2.0", "1.2.0.rebuild-1"]

    def test_whitespace_and_empty_entries(self) -> None:
        text = (
            "<metadata><versioning><versions>"
            "<version> 1.0 </version><version></version>"
            "</versions></versioning></metadata>"
        )
        assert parse_maven_metadata(text) == ["1.0"]

    def test_no_versioning(self) -> None:
        assert parse_maven_metadata("<metadata><groupId>g</groupId></metadata>") == []

    def test_malformed(self) -> None:
        with pytest.raises(ET.ParseError):
            parse_maven_metadata("<metadata><versioning>")


class TestLocalRepositoryMetadata:
    """Tests for LocalRepositoryMetadata."""

    def test_metadata_path(self, tmp_path: Path) -> None:
        source = LocalRepositoryMetadata(tmp_path)
        expected = tmp_path / "org" / "example" / "core" / "maven-metadata.xml"
        assert source.metadata_path(CORE) == expected

    def test_reads_versions(self, tmp_repository: Path) -> None:
        source = LocalRepositoryMetadata(tmp_repository)
        assert list(source.versions(CORE)) == [
            "1.2.0",
            "1.2.0.rebuild-01",
            "1.2.0.rebuild-02",
        ]

    def test_namespaced_file(self, tmp_repository: Path) -> None:
        source = LocalRepositoryMetadata(tmp_repository)
        source.metadata_path(CORE).write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<metadata xmlns="http://maven.apache.org/METADATA/1.1.0">'
            "<versioning><versions><version>1.2.0.rebuild-07</version></versions>"
            "</versioning></metadata>\n"
        )
        assert list(source.versions(CORE)) == ["1.2.0.rebuild-07"]

    def test_missing_file_means_unpublished(self, tmp_repository: Path) -> None:
        source = LocalRepositoryMetadata(tmp_repository)
        missing = Coordinate(group_id="org.example", artifact_id="missing")
        assert list(source.versions(missing)) == []

    def test_malformed_file(self, tmp_repository: Path) -> None:
        source = LocalRepositoryMetadata(tmp_repository)
        source.metadata_path(CORE).write_text("<metadata>")
        with pytest.raises(MetadataUnavailable, match="org.example:core"):
            source.versions(CORE)


class TestStaticMetadata:
    def test_known_and_unknown(self) -> None:
        source = StaticMetadata({CORE: ["1.0.0.foo-1"]})
        assert list(source.versions(CORE)) == ["1.0.0.foo-1"]
        other = Coordinate(group_id="org.example", artifact_id="api")
        assert list(source.versions(other)) == []
