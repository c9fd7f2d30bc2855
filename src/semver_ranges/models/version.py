"""Semantic version value type."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from ..ordering import Order, compare
from .identifiers import BuildMetadata, Prerelease

# Sentinel for open-ended bounds; parsed components always stay below it.
COMPONENT_MAX = sys.maxsize


@dataclass(frozen=True, eq=False)
class Version:
    """A ``major.minor.patch[-prerelease][+build]`` version.

    Ordering and equality consider (major, minor, patch, prerelease) only;
    build metadata is carried along for display.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: Prerelease = field(default_factory=Prerelease)
    build_metadata: BuildMetadata = field(default_factory=BuildMetadata)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Version {name} must be a non-negative integer: {value!r}")
        if not isinstance(self.prerelease, Prerelease):
            raise ValueError("prerelease must be a Prerelease")
        if not isinstance(self.build_metadata, BuildMetadata):
            raise ValueError("build_metadata must be a BuildMetadata")

    @classmethod
    def parse(cls, text: str, *, strict: bool | None = None) -> Version:
        """Parse ``text``; see ``parsers.version.parse``.

        Raises:
            InvalidVersion: if ``text`` is not a version.
            ConfigError: if ``strict`` is None and the settings fail to load.
        """
        from ..parsers.version import parse

        return parse(text, strict=strict)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def next_after(self) -> Version:
        """Return the smallest release strictly greater than this version.

        Prerelease and build metadata are dropped, so ``1.2.3-beta`` gives
        ``1.2.4``.
        """
        return Version(self.major, self.minor, self.patch + 1)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build_metadata:
            text += f"+{self.build_metadata}"
        return text

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Order.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Order.EQUAL

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Order.LESS

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Order.GREATER

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Order.GREATER

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is not Order.LESS


MAX_VERSION = Version(COMPONENT_MAX, COMPONENT_MAX, COMPONENT_MAX)
