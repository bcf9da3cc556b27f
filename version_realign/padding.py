"""Serial number padding.

Rebuild serials are rendered with a fixed number of digits (e.g., "foo-001")
so the width already used in published versions has to be carried forward.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SERIAL_TOKEN_RE = re.compile(r"(?:^|[.\-_])(\d+)$")


def serial_token(version: str) -> str | None:
    """Return the trailing numeric token of a version, digits as written.

    Examples:
        "1.2.0.GA-foo-001" → "001"
        "1.0.0.Final.rebuild-01912-01" → "01"
        "1.2.0.GA-foo" → None
    """
    m = _SERIAL_TOKEN_RE.search(version)
    return m.group(1) if m else None


def resolve_padding(explicit_width: int, candidates: Iterable[str]) -> int:
    """Determine how many digits the next serial number should use.

    An explicit width greater than zero always wins. Otherwise the width is
    the length of the longest trailing serial token among the candidates,
    counting leading zeros ("001" is 3 wide). With no tokens at all the
    width is 1, i.e. no padding.
    """
    if explicit_width > 0:
        return explicit_width
    width = 1
    for version in candidates:
        token = serial_token(version)
        if token is not None:
            width = max(width, len(token))
    return width


def pad_serial(serial: int, width: int) -> str:
    """Left-pad a serial number with zeros. Never truncates.

    Examples:
        pad_serial(1, 3) → "001"
        pad_serial(10, 1) → "10"
    """
    return str(serial).zfill(width)
