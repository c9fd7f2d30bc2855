"""Result holder for range difference."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interval import Interval


@dataclass(frozen=True)
class RangeDifference:
    """The parts of a range left uncovered by another, below and above it."""

    before: Interval | None = None
    after: Interval | None = None

    def __bool__(self) -> bool:
        return self.before is not None or self.after is not None

    def parts(self) -> list[Interval]:
        return [part for part in (self.before, self.after) if part is not None]
