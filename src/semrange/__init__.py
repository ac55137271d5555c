"""semrange: parse, compare and range-match semantic version strings.

The public operations live in :mod:`semrange.core` and are re-exported here
so that callers can simply ``from semrange import parse_version``.
"""

from .core import (
    check_constraints,
    compare_version,
    format_range,
    format_version,
    parse_version,
    parse_version_parts,
    parse_version_range,
    range_is_satisfied_by,
    try_parse_version,
    try_parse_version_range,
)
from .models import (
    AlphanumericIdentifier,
    BuildMetadata,
    CoreVersion,
    NumericIdentifier,
    PreRelease,
    PreReleaseIdentifier,
    Version,
    VersionRange,
)
from .parsers.errors import ParseError, ParseResult

__all__ = [
    "AlphanumericIdentifier",
    "BuildMetadata",
    "CoreVersion",
    "NumericIdentifier",
    "ParseError",
    "ParseResult",
    "PreRelease",
    "PreReleaseIdentifier",
    "Version",
    "VersionRange",
    "check_constraints",
    "compare_version",
    "format_range",
    "format_version",
    "parse_version",
    "parse_version_parts",
    "parse_version_range",
    "range_is_satisfied_by",
    "try_parse_version",
    "try_parse_version_range",
]
