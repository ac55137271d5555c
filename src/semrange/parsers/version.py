"""Recursive-descent parser for SemVer version strings.

Grammar::

    version    := core ('-' prerelease)? ('+' buildmeta)?
    core       := digits '.' digits '.' digits
    digits     := '0' | [1-9][0-9]*
    prerelease := prid ('.' prid)*
    prid       := digits | [0-9A-Za-z-]+
    buildmeta  := [0-9A-Za-z-]+ ('.' [0-9A-Za-z-]+)*

A pre-release identifier is numeric only when its run of identifier
characters holds no letter and no hyphen; numeric identifiers must not have
leading zeros, alphanumeric ones may.
"""

from __future__ import annotations

from ..models.build_metadata import BuildMetadata
from ..models.core_version import CoreVersion
from ..models.pre_release import (
    AlphanumericIdentifier,
    NumericIdentifier,
    PreRelease,
    PreReleaseIdentifier,
)
from ..models.version import Version
from .errors import ParseError
from .tokenizer import Char, LookaheadReader

DOT = "."
DASH = "-"
PLUS = "+"


class VersionParser:
    """Parse one version string. Build a new parser for every string."""

    def __init__(self, text: str) -> None:
        self._input = LookaheadReader(text)
        self._text = text

    def parse(self) -> Version:
        core = self._parse_core_version()
        pre_release = PreRelease()
        build_metadata = BuildMetadata()

        next_char = self._input.consume()

        if next_char.is_(DASH):
            pre_release = self._parse_pre_release()
            next_char = self._input.consume()

        if next_char.is_(PLUS):
            build_metadata = self._parse_build_metadata()
            next_char = self._input.consume()

        if not next_char.is_end_of_input():
            raise self._error("Expected end of version. Illegal character found.", next_char)

        return Version(core, pre_release, build_metadata)

    def _parse_core_version(self) -> CoreVersion:
        major = self._consume_number()
        self._consume_character(DOT)
        minor = self._consume_number()
        self._consume_character(DOT)
        patch = self._consume_number()
        return CoreVersion(major, minor, patch)

    def _parse_pre_release(self) -> PreRelease:
        identifiers = [self._parse_pre_release_identifier()]

        while self._input.current().is_(DOT):
            self._input.consume()
            identifiers.append(self._parse_pre_release_identifier())

        return PreRelease(tuple(identifiers))

    def _parse_pre_release_identifier(self) -> PreReleaseIdentifier:
        if self._lookahead_alphanumeric():
            return AlphanumericIdentifier(self._consume_alphanumeric())
        return NumericIdentifier(self._consume_number())

    def _parse_build_metadata(self) -> BuildMetadata:
        current = self._input.current()
        if not current.is_alphanumeric():
            raise self._error("Alpha-Numeric identifier expected.", current)

        chars: list[str] = []
        while True:
            consumed = self._input.consume()
            if consumed.is_(DOT):
                current = self._input.current()
                if current.is_(DOT):
                    raise self._error(
                        "Alpha-Numeric identifier expected, but found period.", current
                    )
                if current.is_end_of_input():
                    raise self._error(
                        "Alpha-Numeric identifier expected, but found end of input.", current
                    )
            chars.append(consumed.value)

            current = self._input.current()
            if not (current.is_alphanumeric() or current.is_(DOT)):
                break

        return BuildMetadata("".join(chars))

    def _lookahead_alphanumeric(self) -> bool:
        """Scan the upcoming identifier run for a letter or hyphen."""
        offset = 0
        while True:
            char = self._input.peek(offset)
            if char.is_letter() or char.is_(DASH):
                return True
            if not char.is_alphanumeric():
                return False
            offset += 1

    def _consume_number(self) -> int:
        current = self._input.current()
        if not current.is_digit():
            raise self._error("Numeric identifier expected.", current)

        if current.is_("0") and self._input.next().is_digit():
            raise self._error("Numeric identifier must not contain leading zeros.", current)

        digits: list[str] = []
        while self._input.current().is_digit():
            digits.append(self._input.consume().value)

        try:
            return int("".join(digits))
        except ValueError as exc:
            # interpreter limit on int/str conversion length
            raise self._error("Numeric identifier too large.", current) from exc

    def _consume_alphanumeric(self) -> str:
        current = self._input.current()
        if not current.is_alphanumeric():
            raise self._error("Alpha-Numeric identifier expected.", current)

        chars: list[str] = []
        while self._input.current().is_alphanumeric():
            chars.append(self._input.consume().value)
        return "".join(chars)

    def _consume_character(self, expected: str) -> None:
        current = self._input.current()
        if not current.is_(expected):
            raise self._error(f"Illegal character. Character '{expected}' expected.", current)
        self._input.consume()

    def _error(self, message: str, char: Char) -> ParseError:
        return ParseError(message, self._text, char.pos)
