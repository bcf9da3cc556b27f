"""Versioning configuration.

Options can come from build properties (strings, e.g. ``-Dsuffix=foo``) or
from a ``[tool.version-realign]`` table in a TOML file. TOML is read with
tomlkit, matching how project files are handled elsewhere in the toolchain.

Recognized options (camelCase property names, snake_case also accepted):

- ``suffix``: manual suffix literal.
- ``incrementSerialSuffix``: serial suffix base.
- ``incrementSerialSuffixPadding``: fixed serial width, 0 derives it.
- ``suffixAlternate``: legacy suffix base to strip.
- ``osgi``: convert to OSGi form (default true).
- ``fill``: zero-fill missing numeric groups (default false).
- ``suffixSnapshot``: keep -SNAPSHOT after the suffix (default false).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigurationError
from .suffix import SuffixMode, SuffixSpec

TOOL_TABLE = "version-realign"

_SUFFIX_TEXT_RE = re.compile(r"^[A-Za-z0-9._\-]*$")


class VersioningConfig(BaseModel):
    """Resolved versioning options for one batch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    suffix: str | None = None
    increment_serial_suffix: str | None = Field(default=None, alias="incrementSerialSuffix")
    increment_serial_suffix_padding: int = Field(
        default=0, ge=0, alias="incrementSerialSuffixPadding"
    )
    suffix_alternate: str | None = Field(default=None, alias="suffixAlternate")
    osgi: bool = True
    fill: bool = False
    suffix_snapshot: bool = Field(default=False, alias="suffixSnapshot")

    @model_validator(mode="after")
    def _check_suffixes(self) -> VersioningConfig:
        """Reject contradictory or malformed suffix options.

        Raises:
            ConfigurationError: Propagated as is, not wrapped in a pydantic
                ValidationError.
        """
        if self.suffix is not None and self.increment_serial_suffix is not None:
            raise ConfigurationError(
                "Both 'suffix' and 'incrementSerialSuffix' are set; "
                "choose a manual or a serial suffix, not both"
            )
        if self.suffix is not None:
            _check_suffix_text("suffix", self.suffix, allow_empty=False)
        if self.increment_serial_suffix is not None:
            _check_suffix_text("incrementSerialSuffix", self.increment_serial_suffix, allow_empty=True)
        if self.suffix_alternate is not None:
            _check_suffix_text("suffixAlternate", self.suffix_alternate, allow_empty=False)
        return self

    @property
    def enabled(self) -> bool:
        """Versioning runs only when a manual or serial suffix is configured."""
        return self.suffix is not None or self.increment_serial_suffix is not None

    @property
    def serial(self) -> bool:
        return self.increment_serial_suffix is not None

    def suffix_spec(self) -> SuffixSpec:
        """Build the suffix policy for this configuration.

        Raises:
            ConfigurationError: If no suffix is configured.
        """
        if self.suffix is not None:
            mode, literal = SuffixMode.MANUAL, self.suffix
        elif self.increment_serial_suffix is not None:
            mode, literal = SuffixMode.SERIAL, self.increment_serial_suffix
        else:
            raise ConfigurationError("No suffix configured")
        return SuffixSpec(
            mode=mode,
            literal=literal,
            alternate=self.suffix_alternate,
            padding=self.increment_serial_suffix_padding,
        )

    @classmethod
    def from_properties(
        cls, properties: Mapping[str, Any], *, strict: bool = False
    ) -> VersioningConfig:
        """Build a config from a property mapping.

        Values may be strings ("true", "3") or already-typed values. Keys that
        are not versioning options are ignored unless ``strict`` is set.

        Raises:
            ConfigurationError: On unknown keys (strict), bad values, or
                contradictory options.
        """
        options: dict[str, Any] = {}
        for key, value in properties.items():
            name = _OPTION_NAMES.get(key)
            if name is None:
                if strict:
                    raise ConfigurationError(f"Unknown versioning option '{key}'")
                continue
            options[name] = value
        try:
            return cls.model_validate(options)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid versioning options: {exc}") from exc


def _check_suffix_text(option: str, value: str, *, allow_empty: bool) -> None:
    if not value and not allow_empty:
        raise ConfigurationError(f"'{option}' must not be empty")
    if not _SUFFIX_TEXT_RE.match(value):
        raise ConfigurationError(
            f"'{option}' value '{value}' may only contain letters, digits, '.', '-' and '_'"
        )


def _option_names() -> dict[str, str]:
    names: dict[str, str] = {}
    for name, field in VersioningConfig.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name
    return names


_OPTION_NAMES = _option_names()


def read_config_table(path: Path) -> dict[str, Any]:
    """Read the [tool.version-realign] table of a TOML file.

    Returns an empty dict if the file has no such table.
    """
    doc = tomlkit.parse(path.read_text()).unwrap()
    table = doc.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"[tool.{TOOL_TABLE}] in {path} is not a table")
    return table


def load_config(
    path: Path | None = None, overrides: Mapping[str, Any] | None = None
) -> VersioningConfig:
    """Load the versioning config from a TOML file plus property overrides.

    Overrides win over values from the file. Both are checked strictly, so a
    misspelled option is reported instead of silently ignored.
    """
    options: dict[str, Any] = {}
    for source in (read_config_table(path) if path else {}, overrides or {}):
        for key, value in source.items():
            name = _OPTION_NAMES.get(key)
            if name is None:
                raise ConfigurationError(f"Unknown versioning option '{key}'")
            options[name] = value
    return VersioningConfig.from_properties(options, strict=True)
