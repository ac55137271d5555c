"""Version and version range parsers."""

from __future__ import annotations

from .errors import ParseError, ParseResult
from .tokenizer import Char, Lookahead, LookaheadReader
from .version import VersionParser
from .version_range import VersionRangeParser

__all__ = [
    "Char",
    "Lookahead",
    "LookaheadReader",
    "ParseError",
    "ParseResult",
    "VersionParser",
    "VersionRangeParser",
]
