"""Pre-release identifiers and their precedence rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

_IDENTIFIER_CHARS = frozenset("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class PreReleaseIdentifier(ABC):
    """One dot-separated element of a pre-release.

    Exactly two kinds exist: :class:`NumericIdentifier` and
    :class:`AlphanumericIdentifier`. Numeric identifiers compare numerically
    and always rank below alphanumeric ones, which compare in ASCII order.
    """

    __slots__ = ()

    is_numeric: bool = False

    def compare_to(self, other: PreReleaseIdentifier) -> int:
        if isinstance(self, NumericIdentifier):
            if isinstance(other, NumericIdentifier):
                return _sign(self.value - other.value)
            return -1
        if isinstance(other, NumericIdentifier):
            return 1
        mine, theirs = self.format(), other.format()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseIdentifier):
            return NotImplemented
        return self.compare_to(other) > 0

    @abstractmethod
    def format(self) -> str:
        """Return the identifier as it appears in a version string."""


@dataclass(frozen=True, eq=True)
class NumericIdentifier(PreReleaseIdentifier):
    value: int

    is_numeric = True

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Numeric identifier must be non-negative, got {self.value}")

    def format(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=True)
class AlphanumericIdentifier(PreReleaseIdentifier):
    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Alphanumeric identifier must be non-empty")
        if not set(self.value) <= _IDENTIFIER_CHARS:
            raise ValueError(f"Invalid characters in identifier '{self.value}'")

    def format(self) -> str:
        return self.value


@dataclass(frozen=True)
class PreRelease:
    """Ordered pre-release identifiers; empty means "not a pre-release"."""

    identifiers: tuple[PreReleaseIdentifier, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def compare_to(self, other: PreRelease) -> int:
        # A release outranks every pre-release of the same core version.
        if not self.identifiers:
            return 0 if not other.identifiers else 1
        if not other.identifiers:
            return -1

        for mine, theirs in zip(self.identifiers, other.identifiers):
            comparison = mine.compare_to(theirs)
            if comparison != 0:
                return comparison

        return _sign(len(self.identifiers) - len(other.identifiers))

    def format(self) -> str:
        if not self.identifiers:
            return ""
        return "-" + ".".join(identifier.format() for identifier in self.identifiers)

    @classmethod
    def from_iterable(cls, identifiers: Iterable[int | str | PreReleaseIdentifier]) -> PreRelease:
        """Build a pre-release from ints, strings or ready-made identifiers.

        Strings made only of digits become numeric identifiers.
        """
        converted: list[PreReleaseIdentifier] = []
        for identifier in identifiers:
            if isinstance(identifier, PreReleaseIdentifier):
                converted.append(identifier)
            elif isinstance(identifier, int):
                converted.append(NumericIdentifier(identifier))
            elif identifier.isdigit() and identifier.isascii():
                converted.append(NumericIdentifier(int(identifier)))
            else:
                converted.append(AlphanumericIdentifier(identifier))
        return cls(tuple(converted))
