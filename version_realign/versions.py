"""Version grammar: parsing, OSGi normalization and zero-filling.

A version is read as up to three leading numeric groups (major, minor,
micro) joined by any of the delimiters ".", "-" or "_", followed by an
optional qualifier. A trailing SNAPSHOT marker is split off first.

OSGi requires the form major.minor.micro.qualifier, so normalization fills
missing numeric groups with zeros (e.g., "1.21-GA" → "1.21.0.GA"). Strings
that do not start with a numeric group are passed through unchanged rather
than rejected.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

DELIMITERS = ".-_"

_SNAPSHOT_RE = re.compile(r"^(?P<core>.*?)(?P<tail>[.\-_]?SNAPSHOT)$", re.IGNORECASE)
_VERSION_RE = re.compile(
    r"^(?P<major>\d+)"
    r"(?:(?P<d1>[.\-_])(?P<minor>\d+)"
    r"(?:(?P<d2>[.\-_])(?P<micro>\d+))?)?"
    r"(?:(?P<d3>[.\-_])?(?P<qualifier>.+))?$"
)
_OSGI_RE = re.compile(r"^\d+(\.\d+(\.\d+(\.[A-Za-z0-9_\-]+)?)?)?$")

SNAPSHOT = "SNAPSHOT"


class ParsedVersion(BaseModel):
    """Immutable decomposition of a version string.

    Numeric groups keep their text as written so leading zeros survive a
    round trip. ``delimiters`` holds the separators found before the minor,
    micro and qualifier groups ("" where absent).
    """

    model_config = ConfigDict(frozen=True)

    raw: str
    major: str | None = None
    minor: str | None = None
    micro: str | None = None
    qualifier: str | None = None
    delimiters: tuple[str, str, str] = ("", "", "")
    snapshot: bool = False

    @property
    def numeric(self) -> bool:
        """True if the version starts with a numeric group."""
        return self.major is not None

    @property
    def complete(self) -> bool:
        """True if all of major, minor and micro are present."""
        return self.micro is not None

    def osgi(self) -> str:
        """Render as major.minor.micro[.qualifier], zero-filling as needed."""
        if self.major is None:
            return self.raw
        text = ".".join((self.major, self.minor or "0", self.micro or "0"))
        if self.qualifier:
            # OSGi qualifiers cannot contain dots; extra groups are dash-joined
            text += "." + self.qualifier.replace(".", "-")
        return self._with_snapshot(text, "-" if self.qualifier else ".")

    def filled(self) -> str:
        """Zero-fill missing numeric groups, keeping the original delimiters."""
        if self.major is None:
            return self.raw
        d1, d2, d3 = self.delimiters
        text = f"{self.major}{d1 or '.'}{self.minor or '0'}{d2 or '.'}{self.micro or '0'}"
        if self.qualifier:
            text += (d3 or ".") + self.qualifier
        return self._with_snapshot(text, "-")

    def _with_snapshot(self, text: str, delimiter: str) -> str:
        return f"{text}{delimiter}{SNAPSHOT}" if self.snapshot else text


def split_snapshot(raw: str) -> tuple[str, str]:
    """Split a trailing SNAPSHOT marker off a version.

    Returns:
        Tuple of (version without the marker, the marker text including its
        delimiter, or "" if there was none).

    Examples:
        "6.2.0-SNAPSHOT" → ("6.2.0", "-SNAPSHOT")
        "1.0.0.Final-foo-SNAPSHOT" → ("1.0.0.Final-foo", "-SNAPSHOT")
        "1.2.0" → ("1.2.0", "")
    """
    m = _SNAPSHOT_RE.match(raw)
    if m is None:
        return raw, ""
    return m.group("core"), m.group("tail")


def parse_version(raw: str) -> ParsedVersion:
    """Decompose a version string.

    Never raises: input that does not start with a numeric group is kept
    whole as the qualifier.
    """
    core, tail = split_snapshot(raw)
    m = _VERSION_RE.match(core)
    if m is None:
        return ParsedVersion(raw=raw, qualifier=core or None, snapshot=bool(tail))
    qualifier, d3 = m.group("qualifier"), m.group("d3") or ""
    if qualifier is not None and not qualifier.strip(DELIMITERS):
        # Trailing delimiters only: "1.2.3-" has no qualifier
        qualifier, d3 = None, ""
    return ParsedVersion(
        raw=raw,
        major=m.group("major"),
        minor=m.group("minor"),
        micro=m.group("micro"),
        qualifier=qualifier,
        delimiters=(m.group("d1") or "", m.group("d2") or "", d3),
        snapshot=bool(tail),
    )


def is_osgi_compliant(raw: str) -> bool:
    """Check for major[.minor[.micro[.qualifier]]] with a [A-Za-z0-9_-] qualifier."""
    return _OSGI_RE.match(raw) is not None


def normalize_osgi(raw: str) -> str:
    """Convert a version to OSGi form.

    Examples:
        "1" → "1.0.0"
        "1.21-GA" → "1.21.0.GA"
        "1.21.GA_FINAL" → "1.21.0.GA_FINAL"
        "4.8-2" → "4.8.2"
        "1.0.0.0.0-GA" → "1.0.0.0-0-GA"
        "GA-1-GA" → "GA-1-GA"
    """
    return parse_version(raw).osgi()


def fill_version(raw: str) -> str:
    """Zero-fill missing numeric groups without otherwise changing the version.

    Examples:
        "1" → "1.0.0"
        "1.2.GA" → "1.2.0.GA"
    """
    return parse_version(raw).filled()


def normalize_version(raw: str, *, osgi: bool, fill: bool) -> str:
    """Apply OSGi normalization, or plain zero-filling, or nothing."""
    if osgi:
        return normalize_osgi(raw)
    if fill:
        return fill_version(raw)
    return raw


def has_qualifier(raw: str) -> bool:
    """True if anything besides the numeric groups is present.

    Versions with no leading numeric group count as all qualifier.
    """
    parsed = parse_version(raw)
    return not parsed.numeric or bool(parsed.qualifier)
