"""Suffix policy: decide what rebuild suffix a version gets.

Two policies exist:

- manual: a fixed literal (e.g., "foo-2") replaces any earlier suffix of the
  same family, or is appended.
- serial: a base (e.g., "foo") followed by an auto-incremented serial number
  that is guaranteed to be above every serial already published for the
  same version.

A suffix is attached with "." to a bare numeric version ("1.2.0.foo-1") and
with "-" once a qualifier exists ("1.2.0.GA-foo-1").
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .padding import pad_serial, resolve_padding
from .versions import has_qualifier, normalize_osgi, normalize_version, parse_version

_TRAILING_SERIAL_RE = re.compile(r"^(?P<base>.*?)[.\-_]\d+$")
_EMPTY_BASE_RE = re.compile(r"^(?P<core>.*?)(?P<sep>[.\-_])(?P<serial>\d+)$")


class SuffixMode(Enum):
    """How the suffix is produced."""

    MANUAL = "manual"
    SERIAL = "serial"


class SuffixSpec(BaseModel):
    """A resolved suffix policy.

    Attributes:
        mode: Manual literal or auto-incremented serial.
        literal: The configured text, e.g. "foo-2" (manual) or "foo-0" (serial).
        alternate: Legacy base whose serial suffix is stripped before applying.
        padding: Fixed serial width, or 0 to derive it from published versions.
    """

    model_config = ConfigDict(frozen=True)

    mode: SuffixMode
    literal: str
    alternate: str | None = None
    padding: int = 0

    @property
    def base(self) -> str:
        """The suffix family: the literal without a trailing serial number."""
        return strip_serial(self.literal)


@dataclass(frozen=True)
class SuffixMatch:
    """Location of a suffix at the end of a version.

    For "1.2.0.GA-foo_3" with base "foo": core="1.2.0.GA", separator="-",
    base="foo", delimiter="_", serial="3".
    """

    core: str
    separator: str
    base: str
    delimiter: str | None
    serial: str | None

    @property
    def serial_number(self) -> int:
        return int(self.serial) if self.serial else 0

    def with_serial(self, serial: str) -> str:
        """Render the same suffix carrying a different serial token."""
        if not self.base:
            return f"{self.core}{self.separator}{serial}"
        return f"{self.core}{self.separator}{self.base}{self.delimiter or '-'}{serial}"


def strip_serial(text: str) -> str:
    """Drop a trailing delimited serial number.

    Examples:
        "foo-0" → "foo"
        "foo-bar-1" → "foo-bar"
        "Beta1" → "Beta1"
    """
    m = _TRAILING_SERIAL_RE.match(text)
    return m.group("base") if m else text


def separator_for(core: str) -> str:
    """Pick the delimiter used to attach a suffix to ``core``."""
    return "-" if has_qualifier(core) else "."


def find_suffix(version: str, base: str) -> SuffixMatch | None:
    """Find a suffix of the given family at the end of a version.

    The base must start on a delimiter boundary and may be followed by a
    delimited serial number. Dashes inside the base are matched literally.
    With an empty base the suffix is a bare serial after a complete
    major.minor.micro version, e.g. "1.2.0.3".
    """
    if not base:
        m = _EMPTY_BASE_RE.match(version)
        if m is None or not parse_version(m.group("core")).complete:
            return None
    else:
        pattern = re.compile(
            r"^(?P<core>.+?)(?P<sep>[.\-_])"
            + re.escape(base)
            + r"(?:(?P<delim>[.\-_])(?P<serial>\d+))?$"
        )
        m = pattern.match(version)
        if m is None:
            return None
    if not _within_qualifier(version, m.end("sep")):
        return None
    return SuffixMatch(
        m.group("core"),
        m.group("sep"),
        base,
        m.groupdict().get("delim"),
        m.group("serial"),
    )


def _within_qualifier(version: str, start: int) -> bool:
    """A suffix can never overlap the numeric groups of a version."""
    parsed = parse_version(version)
    if not parsed.numeric:
        return True
    if not parsed.qualifier:
        return False
    return start >= len(version) - len(parsed.qualifier)


def handle_alternate(version: str, spec: SuffixSpec) -> str:
    """Strip a serial suffix from the alternate family.

    This lets a build switch suffix families (e.g., from "redhat" to
    "temporary-redhat") and start from the bare version. A tail that belongs
    to the configured base is left alone even if it also ends with the
    alternate.
    """
    if not spec.alternate or spec.alternate == spec.base:
        return version
    if find_suffix(version, spec.base) is not None:
        return version
    match = find_suffix(version, spec.alternate)
    if match is None or match.serial is None:
        return version
    return match.core


def core_key(core: str) -> str:
    """Comparison key for the part of a version before its suffix."""
    return normalize_osgi(core)


def matching_serials(
    core: str,
    base: str,
    candidates: Iterable[str],
    *,
    osgi: bool = True,
    fill: bool = False,
) -> list[SuffixMatch]:
    """Collect candidate suffixes of the same family on the same version.

    Candidates are normalized the same way as the version being calculated,
    so "1.2-foo-1" and "1.2.0.foo-1" both count for "1.2.0". Candidates
    without a serial number are skipped.
    """
    key = core_key(core)
    matches: list[SuffixMatch] = []
    for candidate in candidates:
        match = find_suffix(normalize_version(candidate, osgi=osgi, fill=fill), base)
        if match is not None and match.serial is not None and core_key(match.core) == key:
            matches.append(match)
    return matches


def highest_serial(matches: Iterable[SuffixMatch]) -> int:
    """Highest serial number among matches, 0 if there are none."""
    return max((m.serial_number for m in matches), default=0)


def apply_suffix(
    version: str,
    spec: SuffixSpec,
    candidates: Iterable[str] = (),
    *,
    osgi: bool = True,
    fill: bool = False,
) -> str:
    """Apply a suffix policy to a version (without any SNAPSHOT marker).

    Pure and deterministic. Re-applying to the result with the same
    candidates returns the result unchanged.

    Args:
        version: The declared version, SNAPSHOT marker already removed.
        spec: The suffix policy.
        candidates: Versions already published for this coordinate.
        osgi: Normalize to OSGi form before applying the suffix.
        fill: Zero-fill missing numeric groups when ``osgi`` is off.
    """
    version = handle_alternate(version, spec)
    version = normalize_version(version, osgi=osgi, fill=fill)
    if spec.mode is SuffixMode.MANUAL:
        return _apply_manual(version, spec)
    return _apply_serial(version, spec, candidates, osgi=osgi, fill=fill)


def _apply_manual(version: str, spec: SuffixSpec) -> str:
    match = find_suffix(version, spec.base)
    core = match.core if match is not None else version
    return f"{core}{separator_for(core)}{spec.literal}"


def _apply_serial(
    version: str,
    spec: SuffixSpec,
    candidates: Iterable[str],
    *,
    osgi: bool,
    fill: bool,
) -> str:
    base = spec.base
    match = find_suffix(version, base)
    core = match.core if match is not None else version
    current = match.serial_number if match is not None else 0

    published = matching_serials(core, base, candidates, osgi=osgi, fill=fill)
    next_serial = highest_serial(published) + 1
    if next_serial <= current:
        # Already above everything published; recomputing must not bump it
        return version

    if published:
        width = resolve_padding(spec.padding, (m.serial for m in published if m.serial))
    else:
        width = resolve_padding(spec.padding, [match.serial] if match and match.serial else [])
    serial = pad_serial(next_serial, width)

    if match is not None:
        return match.with_serial(serial)
    suffix = f"{base}-{serial}" if base else serial
    return f"{core}{separator_for(core)}{suffix}"
