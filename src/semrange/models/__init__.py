"""Immutable value types for versions and version ranges."""

from __future__ import annotations

from .build_metadata import BuildMetadata
from .core_version import CoreVersion
from .pre_release import (
    AlphanumericIdentifier,
    NumericIdentifier,
    PreRelease,
    PreReleaseIdentifier,
)
from .version import Version
from .version_range import VersionRange

__all__ = [
    "AlphanumericIdentifier",
    "BuildMetadata",
    "CoreVersion",
    "NumericIdentifier",
    "PreRelease",
    "PreReleaseIdentifier",
    "Version",
    "VersionRange",
]
