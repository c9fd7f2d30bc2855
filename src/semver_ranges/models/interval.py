"""Half-open version interval ``[low, high)``."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable

from .difference import RangeDifference
from .version import MAX_VERSION, Version


@dataclass(frozen=True)
class Interval:
    """Every version ``v`` with ``low <= v < high``.

    Unlike Range, an interval is not anchored to a kind, so it can describe the
    leftovers of a difference such as ``1.2.0<1.5.0``.
    """

    low: Version
    high: Version

    def __post_init__(self) -> None:
        if not self.high > self.low:
            raise ValueError(f"Interval high {self.high} must be greater than low {self.low}")

    @classmethod
    def everything(cls) -> Interval:
        return cls(Version(), MAX_VERSION)

    @classmethod
    def exactly(cls, version: Version) -> Interval:
        return cls(version, version.next_after())

    @classmethod
    def parse(cls, text: str) -> Interval:
        from ..parsers.range import parse_interval

        return parse_interval(text)

    @property
    def is_bounded(self) -> bool:
        return self.high != MAX_VERSION

    def __str__(self) -> str:
        if not self.is_bounded:
            return f"+{self.low}"
        return f"{self.low}<{self.high}"

    def contains(self, other: Version | Interval) -> bool:
        if isinstance(other, Interval):
            return self.low <= other.low and self.high >= other.high
        return self.low <= other < self.high

    __contains__ = contains

    def overlaps(self, other: Interval) -> bool:
        return self.contains(other.low) or other.contains(self.low)

    def intersection(self, other: Interval) -> Interval | None:
        low = max(self.low, other.low)
        high = min(self.high, other.high)
        if low < high:
            return Interval(low, high)
        return None

    def union(self, other: Interval) -> Interval | None:
        """Return the single interval covering both, or None if there is a gap."""
        first, second = (self, other) if self.low <= other.low else (other, self)
        if second.low > first.high:
            return None
        return Interval(first.low, max(first.high, second.high))

    def difference(self, other: Interval) -> RangeDifference:
        if not self.overlaps(other):
            if self.low < other.low:
                return RangeDifference(before=self)
            return RangeDifference(after=self)

        before = Interval(self.low, other.low) if self.low < other.low else None
        after = Interval(other.high, self.high) if self.high > other.high else None
        return RangeDifference(before=before, after=after)

    def max_satisfying(self, versions: Iterable[Version]) -> Version | None:
        best: Version | None = None
        for version in versions:
            if self.contains(version) and (best is None or version > best):
                best = version
        return best
