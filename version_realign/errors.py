"""Exception types raised by version-realign."""

from __future__ import annotations


class RealignError(Exception):
    """Base class for all version-realign errors."""


class ConfigurationError(RealignError):
    """Raised when the versioning options contradict each other or are malformed.

    Always raised while the configuration is being built, before any
    coordinate is calculated, so a batch never produces partial results.
    """


class MetadataUnavailable(RealignError):
    """Raised by a metadata source that could not read a coordinate's history.

    Not fatal: the batch coordinator treats the coordinate as unpublished.
    """

    def __init__(self, coordinate: object, reason: str = "") -> None:
        self.coordinate = coordinate
        self.reason = reason
        message = f"Published versions of {coordinate} unavailable"
        super().__init__(f"{message}: {reason}" if reason else message)
