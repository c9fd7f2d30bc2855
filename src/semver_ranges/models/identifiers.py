"""Prerelease and build metadata identifier sequences."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..ordering import Order

IDENTIFIER_RE = re.compile(r"[0-9A-Za-z-]+")


def _validate(identifiers: tuple[str, ...], what: str) -> None:
    if not isinstance(identifiers, tuple):
        raise ValueError(f"{what} identifiers must be a tuple of strings")
    for ident in identifiers:
        if not isinstance(ident, str) or not IDENTIFIER_RE.fullmatch(ident):
            raise ValueError(f"Invalid {what} identifier: {ident!r}")


def is_numeric(ident: str) -> bool:
    return ident.isdigit()


def _compare_identifier(left: str, right: str) -> Order:
    left_numeric = is_numeric(left)
    right_numeric = is_numeric(right)
    if left_numeric and right_numeric:
        return Order.of(int(left), int(right))
    if left_numeric:
        return Order.LESS
    if right_numeric:
        return Order.GREATER
    return Order.of(left, right)


@dataclass(frozen=True, eq=False)
class Prerelease:
    """Dot-separated prerelease tag, e.g. ``alpha.1``.

    An empty tag means "not a prerelease" and has the highest precedence.
    Equality follows precedence, so ``rc.01`` equals ``rc.1``.
    """

    identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _validate(self.identifiers, "prerelease")

    def __bool__(self) -> bool:
        return bool(self.identifiers)

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Prerelease):
            return NotImplemented
        return self.compare(other) is Order.EQUAL

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def key(self) -> tuple[tuple[int, int | str], ...]:
        """Hashable form in which precedence-equal tags are identical."""
        return tuple((0, int(i)) if is_numeric(i) else (1, i) for i in self.identifiers)

    def compare(self, other: Prerelease) -> Order:
        if not self.identifiers or not other.identifiers:
            # No tag outranks any tag.
            return Order.of(not self.identifiers, not other.identifiers)

        for left, right in zip(self.identifiers, other.identifiers):
            order = _compare_identifier(left, right)
            if order is not Order.EQUAL:
                return order
        return Order.of(len(self.identifiers), len(other.identifiers))

    @classmethod
    def parse(cls, text: str, *, strict: bool | None = None) -> Prerelease:
        from ..parsers.identifiers import parse_prerelease

        return parse_prerelease(text, strict=strict)


@dataclass(frozen=True)
class BuildMetadata:
    """Dot-separated build metadata, e.g. ``sha.5114f85``. Never ordered."""

    identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _validate(self.identifiers, "build metadata")

    def __bool__(self) -> bool:
        return bool(self.identifiers)

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    @classmethod
    def parse(cls, text: str) -> BuildMetadata:
        from ..parsers.identifiers import parse_build_metadata

        return parse_build_metadata(text)
