"""Core entrypoints.

Parsing, comparison, range matching and formatting of versions, plus the
constraint check used by the command line. Everything except
:func:`check_constraints` is a pure function of in-memory strings and values.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import ConstraintsDocument
from .models.version import Version
from .models.version_range import VersionRange
from .parsers.errors import ParseError, ParseResult
from .parsers.version import VersionParser
from .parsers.version_range import VersionRangeParser
from .report import aggregate

logger = logging.getLogger(__name__)


def parse_version(text: str) -> Version:
    """Parse ``text`` into a :class:`Version`.

    Raises:
        ParseError: with the column of the first offending character.
    """
    return VersionParser(text).parse()


def parse_version_parts(
    core: str,
    pre_release: str | None = None,
    build_metadata: str | None = None,
) -> Version:
    """Parse a version given as separate core, pre-release and build strings.

    ``parse_version_parts("1.2.3", "beta.1", "exp")`` is the same as
    ``parse_version("1.2.3-beta.1+exp")``.
    """
    text = core
    if pre_release is not None:
        text += f"-{pre_release}"
    if build_metadata is not None:
        text += f"+{build_metadata}"
    return VersionParser(text).parse()


def parse_version_range(text: str) -> VersionRange:
    """Parse any of the supported range notations into a :class:`VersionRange`.

    Raises:
        ParseError: with the column of the first offending character, relative
            to ``text`` even when the error lies in an embedded version.
    """
    return VersionRangeParser(text).parse()


def try_parse_version(text: str) -> ParseResult[Version]:
    """Like :func:`parse_version`, but return the error instead of raising it."""
    try:
        return ParseResult(value=parse_version(text))
    except ParseError as exc:
        return ParseResult(error=exc)


def try_parse_version_range(text: str) -> ParseResult[VersionRange]:
    """Like :func:`parse_version_range`, but return the error instead of raising it."""
    try:
        return ParseResult(value=parse_version_range(text))
    except ParseError as exc:
        return ParseResult(error=exc)


def compare_version(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as ``a`` has lower, equal or higher precedence than ``b``."""
    return a.compare_to(b)


def range_is_satisfied_by(version_range: VersionRange, version: Version | str) -> bool:
    """Return True if ``version`` (a Version or a version string) is in the range."""
    return version_range.is_satisfied_by(version)


def format_version(version: Version) -> str:
    return version.format()


def format_range(version_range: VersionRange) -> str:
    return version_range.format()


def check_constraints(document: ConstraintsDocument) -> dict[str, Any]:
    """Check every declared constraint against the installed versions.

    Returns: dict report with one finding per constraint that is missing an
    installed version, has an unparsable range or version, or is not
    satisfied. Parse failures are reported with their column.
    """
    findings: list[dict[str, Any]] = []

    for name, expression in sorted(document.constraints.items()):
        installed = document.installed.get(name)
        finding: dict[str, Any] = {
            "package": name,
            "constraint": expression,
            "installed": installed,
        }

        try:
            version_range = parse_version_range(expression)
        except ParseError as exc:
            findings.append(_parse_failure(finding, "invalid-range", exc))
            continue

        if installed is None:
            findings.append({**finding, "kind": "missing"})
            continue

        try:
            version = parse_version(installed)
        except ParseError as exc:
            findings.append(_parse_failure(finding, "invalid-version", exc))
            continue

        if not version_range.is_satisfied_by(version):
            findings.append(
                {**finding, "kind": "unsatisfied", "normalised": version_range.format()}
            )
            continue

        logger.debug("%s %s satisfies %s", name, installed, expression)

    logger.debug("Checked %d constraint(s), %d finding(s)", len(document.constraints), len(findings))
    return aggregate(findings, total_constraints=len(document.constraints))


def _parse_failure(finding: dict[str, Any], kind: str, error: ParseError) -> dict[str, Any]:
    return {**finding, "kind": kind, "message": error.message, "column": error.position}
