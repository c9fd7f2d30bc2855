"""Semantic versions and the algebra of basis-anchored version ranges.

Parse versions and ranges, test containment, and combine ranges pairwise with
intersection, union and difference.
"""

from .errors import InvalidRange, InvalidVersion, SemverError
from .models import (
    COMPONENT_MAX,
    MAX_VERSION,
    BuildMetadata,
    Interval,
    Prerelease,
    Range,
    RangeDifference,
    RangeKind,
    Version,
)
from .ordering import Order, compare

__all__ = [
    # Values
    "BuildMetadata",
    "COMPONENT_MAX",
    "Interval",
    "MAX_VERSION",
    "Prerelease",
    "Range",
    "RangeDifference",
    "RangeKind",
    "Version",
    # Ordering
    "Order",
    "compare",
    # Errors
    "InvalidRange",
    "InvalidVersion",
    "SemverError",
]
