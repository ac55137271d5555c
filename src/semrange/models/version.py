"""Version model combining core version, pre-release and build metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable

from .build_metadata import BuildMetadata
from .core_version import CoreVersion
from .pre_release import PreRelease, PreReleaseIdentifier


@dataclass(frozen=True)
class Version:
    """Immutable version value with SemVer precedence.

    Equality is structural and includes build metadata. The ordering
    operators follow precedence, which ignores build metadata, so two
    versions differing only in build metadata are ``<=`` and ``>=`` each
    other without being ``==``.
    """

    core: CoreVersion
    pre_release: PreRelease = field(default_factory=PreRelease)
    build_metadata: BuildMetadata = field(default_factory=BuildMetadata)

    @property
    def major(self) -> int:
        return self.core.major

    @property
    def minor(self) -> int:
        return self.core.minor

    @property
    def patch(self) -> int:
        return self.core.patch

    @property
    def is_pre_release(self) -> bool:
        return bool(self.pre_release)

    def compare_to(self, other: Version) -> int:
        comparison = self.core.compare_to(other.core)
        if comparison != 0:
            return comparison
        return self.pre_release.compare_to(other.pre_release)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def format(self) -> str:
        return self.core.format() + self.pre_release.format() + self.build_metadata.format()

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        pre_release: Iterable[int | str | PreReleaseIdentifier] = (),
        build_metadata: str = "",
    ) -> Version:
        """Build a version directly from its components, without parsing."""
        return cls(
            core=CoreVersion(major, minor, patch),
            pre_release=PreRelease.from_iterable(pre_release),
            build_metadata=BuildMetadata(build_metadata),
        )
