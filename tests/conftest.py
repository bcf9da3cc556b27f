"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from version_realign.calculator import VersioningContext, calculate
from version_realign.config import VersioningConfig
from version_realign.models import Coordinate

GROUP_ID = "group.id"
ARTIFACT_ID = "artifact-id"


def metadata_xml(*versions: str) -> str:
    """Render a minimal maven-metadata.xml listing the given versions."""
    entries = "".join(f"      <version>{v}</version>\n" for v in versions)
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>\n"
        "<metadata>\n"
        "  <versioning>\n"
        "    <versions>\n"
        f"{entries}"
        "    </versions>\n"
        "  </versioning>\n"
        "</metadata>\n"
    )


@pytest.fixture
def calc() -> Callable[..., str]:
    """Calculate one version of group.id:artifact-id.

    Keyword arguments are versioning properties, e.g.
    ``calc("1.2.0", incrementSerialSuffix="foo", candidates=["1.2.0.foo-1"])``.
    """

    def _calc(version: str, *, candidates: Iterable[str] = (), **properties: object) -> str:
        config = VersioningConfig.from_properties(properties)
        coordinate = Coordinate(group_id=GROUP_ID, artifact_id=ARTIFACT_ID)
        context = VersioningContext(
            config=config, candidates={coordinate: frozenset(candidates)}
        )
        return calculate(GROUP_ID, ARTIFACT_ID, version, context)

    return _calc


@pytest.fixture
def tmp_repository(tmp_path: Path) -> Path:
    """Create a repository directory with metadata for two coordinates."""
    repo = tmp_path / "repository"
    core = repo / "org" / "example" / "core"
    core.mkdir(parents=True)
    (core / "maven-metadata.xml").write_text(
        metadata_xml("1.2.0", "1.2.0.rebuild-01", "1.2.0.rebuild-02")
    )
    api = repo / "org" / "example" / "api"
    api.mkdir(parents=True)
    (api / "maven-metadata.xml").write_text(metadata_xml("1.2.0"))
    return repo


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Create a TOML config file with a [tool.version-realign] table."""
    content = """\
[project]
name = "build"

[tool.version-realign]
incrementSerialSuffix = "rebuild"
incrementSerialSuffixPadding = 3
suffixAlternate = "redhat"
"""
    path = tmp_path / "realign.toml"
    path.write_text(content)
    return path
