"""Value types: versions, ranges, intervals and difference results."""

from __future__ import annotations

from .difference import RangeDifference
from .identifiers import BuildMetadata, Prerelease
from .interval import Interval
from .range import Range, RangeKind
from .version import COMPONENT_MAX, MAX_VERSION, Version

__all__ = [
    "BuildMetadata",
    "COMPONENT_MAX",
    "Interval",
    "MAX_VERSION",
    "Prerelease",
    "Range",
    "RangeDifference",
    "RangeKind",
    "Version",
]
