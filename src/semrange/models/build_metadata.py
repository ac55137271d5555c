"""Build metadata model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildMetadata:
    """Dot-separated build identifiers, carried for display only.

    Build metadata never takes part in ordering or range matching. The empty
    string means the version has no build metadata.
    """

    value: str = ""

    def __bool__(self) -> bool:
        return bool(self.value)

    def format(self) -> str:
        return f"+{self.value}" if self.value else ""
