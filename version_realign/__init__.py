"""Reproducible rebuild versions for multi-module builds."""

from __future__ import annotations

from .batch import build_context, calculate_all
from .calculator import VersioningContext, calculate
from .config import VersioningConfig, load_config
from .errors import ConfigurationError, MetadataUnavailable, RealignError
from .models import Coordinate, ParentRef, Project, VersionChange

__all__ = [
    "ConfigurationError",
    "Coordinate",
    "MetadataUnavailable",
    "ParentRef",
    "Project",
    "RealignError",
    "VersionChange",
    "VersioningConfig",
    "VersioningContext",
    "build_context",
    "calculate",
    "calculate_all",
    "load_config",
]
