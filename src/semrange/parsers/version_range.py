"""Recursive-descent parser for version range expressions.

Four notations are recognised, chosen by the first non-whitespace character,
and all of them reduce to a :class:`~semrange.models.VersionRange`:

``[1.0.0,2.0.0)``
    Interval. ``[``/``]`` are inclusive, ``(``/``)`` exclusive; either
    version may be left out to leave that side unbounded.
``>=1.0.0``, ``>1.0.0``, ``<=2.0.0``, ``<2.0.0``
    Comparison. Bounded on one side only.
``^1.2.3``
    Caret. From the version (inclusive) up to the next version that changes
    its first non-zero component (exclusive): ``^1.2.3`` is
    ``[1.2.3,2.0.0)``, ``^0.1.2`` is ``[0.1.2,0.2.0)`` and ``^0.0.3`` is
    ``[0.0.3,0.0.4)``.
``1.2.+``, ``1.+``, ``+``, ``*``, ``1.2.3``
    Glob. ``1.2.+`` is ``[1.2.0,1.3.0)``, ``1.+`` is ``[1.0.0,2.0.0)``,
    ``+`` and ``*`` match everything and ``1.2.3`` is ``[1.2.3,1.2.4)``.
"""

from __future__ import annotations

from ..models.core_version import CoreVersion
from ..models.version import Version
from ..models.version_range import VersionRange
from .errors import ParseError
from .tokenizer import Char, LookaheadReader
from .version import VersionParser

OPEN_PAREN = "("
CLOSE_PAREN = ")"
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
COMMA = ","
PLUS = "+"
DOT = "."
STAR = "*"
CARET = "^"
GREATER_THAN = ">"
LESS_THAN = "<"
EQUALS = "="

_WHITESPACE = frozenset(" \t\r\n")


class VersionRangeParser:
    """Parse one version range string. Build a new parser for every string."""

    def __init__(self, text: str) -> None:
        self._input = LookaheadReader(text)
        self._text = text

    def parse(self) -> VersionRange:
        while self._input.current().value in _WHITESPACE:
            self._input.consume()

        current = self._input.current()
        if current.is_(OPEN_BRACKET, OPEN_PAREN):
            return self._parse_interval()
        if current.is_(GREATER_THAN, LESS_THAN):
            return self._parse_comparison()
        if current.is_(CARET):
            return self._parse_caret()
        return self._parse_glob()

    def _parse_interval(self) -> VersionRange:
        start_inclusive = self._input.consume().is_(OPEN_BRACKET)
        start: Version | None = None
        end: Version | None = None

        if not self._input.current().is_(COMMA):
            start = self._consume_version_until(COMMA)
        self._consume_character(COMMA)

        if self._input.current().is_(CLOSE_BRACKET, CLOSE_PAREN):
            end_inclusive = self._input.consume().is_(CLOSE_BRACKET)
        else:
            end = self._consume_version_until(CLOSE_BRACKET, CLOSE_PAREN)
            closing = self._input.consume()
            if closing.is_(CLOSE_BRACKET):
                end_inclusive = True
            elif closing.is_(CLOSE_PAREN):
                end_inclusive = False
            else:
                raise self._error(
                    f"Was looking for '{CLOSE_BRACKET}' or '{CLOSE_PAREN}' but couldn't find one",
                    closing,
                )

        self._consume_end_of_input()
        return VersionRange(start, start_inclusive, end, end_inclusive)

    def _parse_comparison(self) -> VersionRange:
        greater_than = self._input.consume().is_(GREATER_THAN)
        inclusive = self._input.current().is_(EQUALS)
        if inclusive:
            self._consume_character(EQUALS)

        version = self._consume_version_until()
        self._consume_end_of_input()

        if greater_than:
            return VersionRange(version, inclusive, None, True)
        return VersionRange(None, True, version, inclusive)

    def _parse_caret(self) -> VersionRange:
        self._consume_character(CARET)
        low = self._consume_version_until()
        self._consume_end_of_input()

        high = Version(low.core.next_caret_bound())
        return VersionRange(low, True, high, False)

    def _parse_glob(self) -> VersionRange:
        low: Version | None
        high: Version | None

        if self._input.current().is_(PLUS, STAR):
            self._input.consume()
            low = None
            high = None
        else:
            major = self._consume_number()
            self._consume_character(DOT)
            if self._input.current().is_(PLUS):
                self._input.consume()
                core = CoreVersion(major, 0, 0)
                low, high = Version(core), Version(core.next_major())
            else:
                minor = self._consume_number()
                self._consume_character(DOT)
                if self._input.current().is_(PLUS):
                    self._input.consume()
                    core = CoreVersion(major, minor, 0)
                    low, high = Version(core), Version(core.next_minor())
                else:
                    patch = self._consume_number()
                    core = CoreVersion(major, minor, patch)
                    low, high = Version(core), Version(core.next_patch())

        self._consume_end_of_input()
        return VersionRange(low, True, high, False)

    def _consume_version_until(self, *delimiters: str) -> Version:
        """Parse the version spanning up to a delimiter, or to end of input."""
        start = self._input.current()
        chars = [self._consume_not_end_of_input().value]

        while True:
            current = self._input.current()
            at_delimiter = current.is_(*delimiters) if delimiters else current.is_end_of_input()
            if at_delimiter:
                break
            chars.append(self._consume_not_end_of_input().value)

        try:
            return VersionParser("".join(chars)).parse()
        except ParseError as exc:
            raise ParseError.rebased(exc, self._text, start.pos) from exc

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

    def _consume_character(self, expected: str) -> None:
        current = self._input.current()
        if not current.is_(expected):
            raise self._error(f"Illegal character. Character '{expected}' expected.", current)
        self._input.consume()

    def _consume_not_end_of_input(self) -> Char:
        current = self._input.current()
        if current.is_end_of_input():
            raise self._error("Found end of input while parsing version range string.", current)
        return self._input.consume()

    def _consume_end_of_input(self) -> None:
        current = self._input.current()
        if not current.is_end_of_input():
            raise self._error("Illegal character. End of input expected.", current)
        self._input.consume()

    def _error(self, message: str, char: Char) -> ParseError:
        return ParseError(message, self._text, char.pos)
