"""Console output for realignment runs.

No logging setup: each phase of a run opens with a ruled header and its
details follow as indented lines, which reads well in build logs.
"""

from __future__ import annotations

import sys
from typing import NoReturn

RULE = "─" * 60


def step(title: str) -> None:
    """Print the header that opens a phase of a realignment run."""
    print(f"\n{RULE}\n{title}\n{RULE}")


def fatal(msg: str) -> NoReturn:
    """Report a problem with the module list on stderr and exit with code 1.

    Called before any version is calculated, so nothing is half-reported.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
