"""Per-coordinate version calculation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import VersioningConfig
from .models import Coordinate
from .suffix import apply_suffix
from .versions import SNAPSHOT, fill_version, is_osgi_compliant, normalize_osgi, split_snapshot


class VersioningContext(BaseModel):
    """Everything a batch needs to calculate versions.

    Built once per batch and only read afterwards.

    Attributes:
        config: The versioning options.
        candidates: Versions already published, per coordinate.
    """

    model_config = ConfigDict(frozen=True)

    config: VersioningConfig
    candidates: Mapping[Coordinate, frozenset[str]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("candidates", mode="after")
    @classmethod
    def _freeze_candidates(
        cls, value: Mapping[Coordinate, frozenset[str]]
    ) -> Mapping[Coordinate, frozenset[str]]:
        return MappingProxyType(dict(value))

    def candidates_for(self, group_id: str, artifact_id: str) -> frozenset[str]:
        """Published versions of a coordinate; empty if nothing is known."""
        coordinate = Coordinate(group_id=group_id, artifact_id=artifact_id)
        return self.candidates.get(coordinate, frozenset())


def calculate(group_id: str, artifact_id: str, version: str, context: VersioningContext) -> str:
    """Compute the realigned version of one module.

    Without a configured suffix the version is only repaired: zero-filled
    when ``fill`` is set, converted when it is not OSGi-compliant. With a
    suffix, the SNAPSHOT marker is removed, the suffix policy applied and the
    marker put back after the suffix only if ``suffix_snapshot`` is set.

    Examples (default options):
        "1" → "1"
        "1.21-GA" → "1.21.0.GA"
        suffix "foo": "1.2.0.GA" → "1.2.0.GA-foo"
    """
    config = context.config
    if not config.enabled:
        return _repair(version, config)

    core, snapshot = split_snapshot(version)
    result = apply_suffix(
        core,
        config.suffix_spec(),
        context.candidates_for(group_id, artifact_id),
        osgi=config.osgi,
        fill=config.fill,
    )
    if snapshot and config.suffix_snapshot:
        result = f"{result}-{SNAPSHOT}"
    return result


def _repair(version: str, config: VersioningConfig) -> str:
    core, snapshot = split_snapshot(version)
    if config.osgi and (config.fill or not is_osgi_compliant(core)):
        core = normalize_osgi(core)
    elif config.fill:
        core = fill_version(core)
    return core + snapshot
