"""Typed errors raised for invalid version and range input."""

from __future__ import annotations


class SemverError(ValueError):
    """Base error for input that cannot be parsed."""


class InvalidVersion(SemverError):
    """Raised when a version string cannot be parsed.

    ``offset`` is the position in ``string`` at which parsing failed.
    """

    def __init__(self, string: str, offset: int = 0) -> None:
        self.string = string
        self.offset = offset
        super().__init__(f"Invalid semantic version: {string}")


class InvalidRange(SemverError):
    """Raised when a version range string cannot be parsed."""

    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(f"Invalid version range string: {string}")
