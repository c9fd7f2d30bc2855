"""String-level entrypoints for manifest tooling.

These wrap the value types for callers that hold raw version and range strings
(e.g. entries read from a lockfile). Invalid input raises InvalidVersion or
InvalidRange.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models.range import Range
from .models.version import Version


def satisfies(installed: str, expr: str) -> bool:
    """Return True if version string ``installed`` lies in range ``expr``."""
    return Range.parse(expr).contains(Version.parse(installed))


def max_satisfying(versions: Iterable[str], expr: str) -> str | None:
    """Return the highest of ``versions`` in range ``expr``, as given.

    Returns None when nothing matches. Among versions of equal precedence the
    first one given wins.
    """
    rng = Range.parse(expr)
    best: tuple[Version, str] | None = None
    for text in versions:
        version = Version.parse(text)
        if not rng.contains(version):
            continue
        if best is None or version > best[0]:
            best = (version, text)
    if best is None:
        return None
    return best[1]


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Sort version strings ascending by semver precedence."""
    return sorted(versions, key=Version.parse)
