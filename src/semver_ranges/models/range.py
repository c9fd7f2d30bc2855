"""Basis-anchored version ranges and their set algebra.

A Range is a basis version plus a kind. The kind pins some components of the
basis and lets the rest float up to an exclusive upper bound:

- ``=1.2.3`` (exact): only ``1.2.3``
- ``~1.2.3`` (same minor): ``1.2.3`` up to, not including, ``1.3.0``
- ``^1.2.3`` (same major): ``1.2.3`` up to, not including, ``2.0.0``
- ``+1.2.3`` (anything greater): ``1.2.3`` and everything above it

Intersections of two ranges are always ranges again. Unions are not: the union
of ``^1.0.0`` and ``^2.0.0`` has no (basis, kind) encoding, and ``union``
returns None for it rather than widening the result.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from collections.abc import Iterable

from .difference import RangeDifference
from .interval import Interval
from .version import MAX_VERSION, Version

logger = logging.getLogger(__name__)


class RangeKind(enum.Enum):
    """Which basis components a range pins."""

    EXACT = "exact"
    SAME_MINOR = "same_minor"
    SAME_MAJOR = "same_major"
    ANYTHING_GREATER = "anything_greater"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, char: str) -> RangeKind | None:
        for kind, prefix in _PREFIXES.items():
            if prefix == char:
                return kind
        return None


_PREFIXES = {
    RangeKind.EXACT: "=",
    RangeKind.SAME_MINOR: "~",
    RangeKind.SAME_MAJOR: "^",
    RangeKind.ANYTHING_GREATER: "+",
}


@dataclass(frozen=True)
class Range:
    """A version range anchored at ``basis``. Equality is (basis, kind)."""

    basis: Version
    kind: RangeKind = RangeKind.EXACT

    def __post_init__(self) -> None:
        if not isinstance(self.basis, Version):
            raise ValueError(f"Range basis must be a Version: {self.basis!r}")
        if not isinstance(self.kind, RangeKind):
            raise ValueError(f"Invalid range kind: {self.kind!r}")

    @classmethod
    def parse(cls, text: str) -> Range:
        from ..parsers.range import parse

        return parse(text)

    @classmethod
    def everything(cls) -> Range:
        return cls(Version(), RangeKind.ANYTHING_GREATER)

    def __str__(self) -> str:
        if self == Range.everything():
            return "*"
        return f"{self.kind.prefix}{self.basis}"

    # ---- Bounds ----------------------------------------------------------------------------

    def first_bad_version(self) -> Version:
        """Return the exclusive upper bound of this range.

        Anything-greater ranges have no finite bound; asking for one is a
        caller bug.
        """
        basis = self.basis
        if self.kind is RangeKind.EXACT:
            return Version(
                basis.major, basis.minor, basis.patch + 1, basis.prerelease, basis.build_metadata
            )
        if self.kind is RangeKind.SAME_MINOR:
            return Version(
                basis.major, basis.minor + 1, 0, basis.prerelease, basis.build_metadata
            )
        if self.kind is RangeKind.SAME_MAJOR:
            return Version(basis.major + 1, 0, 0, basis.prerelease, basis.build_metadata)
        raise AssertionError(f"Range {self} has no finite upper bound")

    @property
    def upper_bound(self) -> Version:
        """Exclusive upper bound, with MAX_VERSION standing in for "none"."""
        if self.kind is RangeKind.ANYTHING_GREATER:
            return MAX_VERSION
        return self.first_bad_version()

    def to_interval(self) -> Interval:
        return Interval(self.basis, self.upper_bound)

    # ---- Containment -----------------------------------------------------------------------

    def contains(self, other: Version | Range) -> bool:
        """Test whether a version satisfies this range, or a range is a subset of it."""
        if isinstance(other, Range):
            return self._contains_range(other)
        return self._contains_version(other)

    __contains__ = contains

    def _contains_version(self, version: Version) -> bool:
        basis = self.basis
        # Prereleases only ever match ranges written against a prerelease, and
        # the other way round.
        if version.is_prerelease != basis.is_prerelease:
            return False

        if self.kind is RangeKind.ANYTHING_GREATER:
            return version >= basis
        if self.kind is RangeKind.SAME_MAJOR:
            return version.major == basis.major and version >= basis
        if self.kind is RangeKind.SAME_MINOR:
            return (
                version.major == basis.major
                and version.minor == basis.minor
                and version >= basis
            )
        return version == basis

    def _contains_range(self, other: Range) -> bool:
        if other.basis < self.basis:
            return False
        if self.kind is RangeKind.ANYTHING_GREATER:
            return True
        if other.kind is RangeKind.ANYTHING_GREATER:
            return False
        return self.first_bad_version() >= other.first_bad_version()

    def overlaps(self, other: Range) -> bool:
        return self.contains(other.basis) or other.contains(self.basis)

    # ---- Set operations --------------------------------------------------------------------

    def intersection(self, other: Range) -> Range | None:
        """Return the range of versions in both, or None if they are disjoint."""
        if other.basis < self.basis:
            return other.intersection(self)

        # From here on self.basis <= other.basis.
        if self.kind is RangeKind.ANYTHING_GREATER:
            return other

        if other.basis.major != self.basis.major:
            return None
        if self.kind is RangeKind.SAME_MAJOR:
            if other.kind is RangeKind.ANYTHING_GREATER:
                return Range(other.basis, RangeKind.SAME_MAJOR)
            return other

        if other.basis.minor != self.basis.minor:
            return None
        if self.kind is RangeKind.SAME_MINOR:
            if other.kind in (RangeKind.ANYTHING_GREATER, RangeKind.SAME_MAJOR):
                return Range(other.basis, RangeKind.SAME_MINOR)
            return other

        # self is exact: only its own basis can be shared.
        if other.basis != self.basis:
            return None
        return self

    def union(self, other: Range) -> Range | None:
        """Return the single range covering both, or None if none exists."""
        if other.basis < self.basis:
            return other.union(self)

        if self.kind is RangeKind.ANYTHING_GREATER:
            return self

        first_bad = self.first_bad_version()
        if other.basis > first_bad:
            logger.debug("No union for disjoint ranges %s and %s", self, other)
            return None

        if other.basis == first_bad:
            # Edge to edge: only representable when other is the more lenient kind.
            if (
                other.kind is RangeKind.ANYTHING_GREATER
                or (other.kind is RangeKind.SAME_MAJOR and self.kind is not RangeKind.SAME_MAJOR)
                or (other.kind is RangeKind.SAME_MINOR and self.kind is RangeKind.EXACT)
            ):
                return Range(self.basis, other.kind)
            logger.debug("No union for adjacent ranges %s and %s", self, other)
            return None

        if other.kind is RangeKind.ANYTHING_GREATER:
            return Range(self.basis, RangeKind.ANYTHING_GREATER)
        if other.first_bad_version() <= first_bad:
            return self
        return Range(self.basis, other.kind)

    def difference(self, other: Range) -> RangeDifference:
        """Return the parts of this range not covered by ``other``."""
        if not self.overlaps(other):
            if self.basis < other.basis:
                return RangeDifference(before=self.to_interval())
            return RangeDifference(after=self.to_interval())

        high = self.upper_bound
        other_high = other.upper_bound
        before = Interval(self.basis, other.basis) if self.basis < other.basis else None
        after = Interval(other_high, high) if high > other_high else None
        return RangeDifference(before=before, after=after)

    def max_satisfying(self, versions: Iterable[Version]) -> Version | None:
        """Return the greatest of ``versions`` inside this range, if any."""
        best: Version | None = None
        for version in versions:
            if not self.contains(version):
                continue
            if best is None or version > best:
                best = version
        return best
