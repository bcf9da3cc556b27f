"""Reactor-wide versioning: calculate every module of a build together.

All modules are calculated against one snapshot of published versions, then
a sync pass makes modules that share a rebuild agree on the serial number
and its width. A module with sparse publication history therefore still
advances to the serial implied by a sibling's richer history.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence

from .calculator import VersioningContext, calculate
from .config import VersioningConfig
from .errors import MetadataUnavailable
from .metadata import MetadataSource
from .models import Coordinate, Project
from .padding import pad_serial, resolve_padding
from .suffix import SuffixMatch, SuffixSpec, core_key, find_suffix


def build_context(
    config: VersioningConfig,
    projects: Iterable[Project],
    metadata: MetadataSource | None = None,
    shared_versions: Iterable[str] | None = None,
) -> VersioningContext:
    """Collect published versions for every distinct coordinate.

    Each coordinate is looked up once. ``shared_versions`` is merged into
    every coordinate's set. A source that raises MetadataUnavailable is
    reported and the coordinate treated as never published.
    """
    shared = frozenset(shared_versions or ())
    candidates: dict[Coordinate, frozenset[str]] = {}

    for project in projects:
        coordinate = project.coordinate
        if coordinate in candidates:
            continue
        known = set(shared)
        if metadata is not None:
            try:
                known.update(metadata.versions(coordinate))
            except MetadataUnavailable as exc:
                print(f"  WARNING: {exc}; assuming no published versions")
        candidates[coordinate] = frozenset(known)

    return VersioningContext(config=config, candidates=candidates)


def calculate_all(
    projects: Sequence[Project], context: VersioningContext
) -> dict[Coordinate, str]:
    """Calculate the new version of every project.

    Returns:
        Map of coordinate → new version. Empty when versioning is disabled.
    """
    config = context.config
    if not config.enabled:
        return {}

    versions = {
        project.coordinate: calculate(
            project.effective_group_id,
            project.artifact_id,
            project.effective_version,
            context,
        )
        for project in projects
    }

    if config.serial:
        versions = sync_reactor(versions, config.suffix_spec())
    return versions


def sync_reactor(versions: Mapping[Coordinate, str], spec: SuffixSpec) -> dict[Coordinate, str]:
    """Give modules on the same version and suffix family the same serial.

    Modules are grouped by the version before their suffix. Within a group,
    every module gets the highest serial in the group, padded to the widest
    serial token (or the configured padding).
    """
    groups: dict[str, list[tuple[Coordinate, SuffixMatch]]] = defaultdict(list)
    for coordinate, version in versions.items():
        match = find_suffix(version, spec.base)
        if match is not None and match.serial is not None:
            groups[core_key(match.core)].append((coordinate, match))

    synced = dict(versions)
    for members in groups.values():
        highest = max(match.serial_number for _, match in members)
        width = resolve_padding(spec.padding, (match.serial for _, match in members if match.serial))
        serial = pad_serial(highest, width)
        for coordinate, match in members:
            synced[coordinate] = match.with_serial(serial)
    return synced
