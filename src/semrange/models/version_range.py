"""Canonical version range: two optional bounds, each inclusive or exclusive."""

from __future__ import annotations

from dataclasses import dataclass

from .version import Version


@dataclass(frozen=True)
class VersionRange:
    """An interval of versions.

    A bound of ``None`` leaves that side unbounded. The inclusive flags are
    stored even when their bound is absent so that ``(,)`` and ``[,]`` keep
    their brackets when formatted.

    Only the core version (``major.minor.patch``) of a candidate is compared
    against the bounds: pre-release and build metadata are ignored, so
    ``1.2.0-beta`` satisfies ``[1.2.0,2.0.0)``.
    """

    start: Version | None
    start_inclusive: bool
    end: Version | None
    end_inclusive: bool

    def is_satisfied_by(self, version: Version | str) -> bool:
        """Return True if ``version`` lies inside this range.

        Strings are parsed first; a malformed string raises ``ParseError``.
        """
        if isinstance(version, str):
            from ..parsers.version import VersionParser

            version = VersionParser(version).parse()

        if self.start is not None:
            comparison = self.start.core.compare_to(version.core)
            if comparison > 0 or (comparison == 0 and not self.start_inclusive):
                return False

        if self.end is not None:
            comparison = self.end.core.compare_to(version.core)
            if self.end_inclusive:
                return comparison >= 0
            return comparison > 0

        return True

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (Version, str)):
            return False
        return self.is_satisfied_by(version)

    def format(self) -> str:
        parts = [
            "[" if self.start_inclusive else "(",
            self.start.format() if self.start is not None else "",
            ",",
            self.end.format() if self.end is not None else "",
            "]" if self.end_inclusive else ")",
        ]
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()
