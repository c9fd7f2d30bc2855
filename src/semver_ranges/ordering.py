"""Three-way ordering of versions."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.version import Version


class Order(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, lhs: object, rhs: object) -> Order:
        """Order two values that support ``<`` (ints, strings)."""
        if lhs < rhs:  # type: ignore[operator]
            return cls.LESS
        if rhs < lhs:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL


def compare(lhs: Version, rhs: Version) -> Order:
    """Compare two versions by semver precedence.

    Major, minor and patch are compared numerically in turn; ties fall through
    to the prerelease tags. Build metadata never takes part.
    """
    for left, right in (
        (lhs.major, rhs.major),
        (lhs.minor, rhs.minor),
        (lhs.patch, rhs.patch),
    ):
        if left != right:
            return Order.of(left, right)
    return lhs.prerelease.compare(rhs.prerelease)
