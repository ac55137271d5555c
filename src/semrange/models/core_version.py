"""Core version model: the numeric ``major.minor.patch`` triple."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CoreVersion:
    """The numeric part of a version, ordered component by component."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def format(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def compare_to(self, other: CoreVersion) -> int:
        if self == other:
            return 0
        return -1 if self < other else 1

    def next_major(self) -> CoreVersion:
        return CoreVersion(self.major + 1, 0, 0)

    def next_minor(self) -> CoreVersion:
        return CoreVersion(self.major, self.minor + 1, 0)

    def next_patch(self) -> CoreVersion:
        return CoreVersion(self.major, self.minor, self.patch + 1)

    def next_caret_bound(self) -> CoreVersion:
        """Bump the first non-zero component, zeroing the ones after it."""
        if self.major != 0:
            return self.next_major()
        if self.minor != 0:
            return self.next_minor()
        return self.next_patch()
