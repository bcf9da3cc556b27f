"""Realignment run: collect → calculate → report.

This module drives one realignment of a multi-module build:
1. Collect already-published versions for every module coordinate
2. Calculate the new version of every module against that snapshot
3. Report old → new per module

Writing the new versions back into build descriptors is left to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .batch import build_context, calculate_all
from .config import VersioningConfig
from .errors import ConfigurationError
from .metadata import MetadataSource
from .models import Coordinate, Project, VersionChange
from .shell import fatal, step


def parse_project_token(token: str) -> Project:
    """Parse a "groupId:artifactId:version" token into a Project.

    Raises:
        ConfigurationError: If the token does not have exactly three
            non-empty parts.
    """
    parts = [part.strip() for part in token.strip().split(":")]
    if len(parts) != 3 or not all(parts):
        raise ConfigurationError(
            f"Invalid project '{token}': expected groupId:artifactId:version"
        )
    group_id, artifact_id, version = parts
    return Project(group_id=group_id, artifact_id=artifact_id, version=version)


def check_unique(projects: Sequence[Project]) -> None:
    """Exit if two projects share a coordinate; results are keyed by it."""
    seen: dict[Coordinate, str] = {}
    for project in projects:
        coordinate = project.coordinate
        if coordinate in seen:
            fatal(
                f"{coordinate} listed twice ({seen[coordinate]} and "
                f"{project.effective_version})"
            )
        seen[coordinate] = project.effective_version


def run_realign(
    projects: Sequence[Project],
    config: VersioningConfig,
    metadata: MetadataSource | None = None,
    shared_versions: Iterable[str] | None = None,
) -> dict[Coordinate, VersionChange]:
    """Calculate new versions for a whole build and print what changes.

    Args:
        projects: Every module of the build.
        config: Versioning options.
        metadata: Where published versions come from, if anywhere.
        shared_versions: Extra published versions applied to every module.

    Returns:
        Map of coordinate → VersionChange. Empty when versioning is disabled.
    """
    check_unique(projects)

    if not config.enabled:
        step("Versioning disabled")
        print("  Neither 'suffix' nor 'incrementSerialSuffix' is configured")
        return {}

    step("Collecting published versions")
    context = build_context(config, projects, metadata, shared_versions)
    for coordinate, known in context.candidates.items():
        print(f"  {coordinate}: {len(known)} published")

    step(f"Calculating versions for {len(projects)} projects")
    new_versions = calculate_all(projects, context)

    changes: dict[Coordinate, VersionChange] = {}
    for project in projects:
        coordinate = project.coordinate
        change = VersionChange(old=project.effective_version, new=new_versions[coordinate])
        changes[coordinate] = change
        marker = "" if change.changed else " (unchanged)"
        print(f"  {coordinate}: {change.old} → {change.new}{marker}")

    return changes
