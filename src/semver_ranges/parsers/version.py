"""Parse ``major.minor.patch[-prerelease][+build]`` version strings."""

from __future__ import annotations

import logging

from ..errors import InvalidVersion
from ..models.identifiers import BuildMetadata, Prerelease
from ..models.version import COMPONENT_MAX, Version
from .identifiers import split_identifiers

logger = logging.getLogger(__name__)


def _read_component(text: str, pos: int, *, strict: bool) -> tuple[int, int]:
    """Read a decimal component starting at ``pos``; return (value, end)."""
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == pos:
        raise InvalidVersion(text, pos)
    digits = text[pos:end]
    if strict and len(digits) > 1 and digits.startswith("0"):
        raise InvalidVersion(text, pos)
    value = int(digits)
    if value >= COMPONENT_MAX:
        raise InvalidVersion(text, pos)
    return value, end


def _expect(text: str, pos: int, char: str) -> int:
    if pos >= len(text) or text[pos] != char:
        raise InvalidVersion(text, pos)
    return pos + 1


def parse(text: str, *, strict: bool | None = None) -> Version:
    """Return the Version for ``text``.

    Raises:
        InvalidVersion: carrying ``text`` and the offset of the failure.
        ConfigError: when ``strict`` is None and the settings cannot be
            loaded (bad SEMVER_RANGES_STRICT value, missing config file).
    """
    if strict is None:
        from ..settings import get_settings

        strict = get_settings().strict

    try:
        major, pos = _read_component(text, 0, strict=strict)
        pos = _expect(text, pos, ".")
        minor, pos = _read_component(text, pos, strict=strict)
        pos = _expect(text, pos, ".")
        patch, pos = _read_component(text, pos, strict=strict)

        prerelease = Prerelease()
        build = BuildMetadata()

        if pos < len(text) and text[pos] == "-":
            start = pos + 1
            plus = text.find("+", start)
            stop = len(text) if plus == -1 else plus
            prerelease = Prerelease(_identifiers(text, start, stop, strict=strict))
            pos = stop

        if pos < len(text) and text[pos] == "+":
            start = pos + 1
            build = BuildMetadata(_identifiers(text, start, len(text), strict=False))
            pos = len(text)

        if pos != len(text):
            raise InvalidVersion(text, pos)
    except InvalidVersion as exc:
        logger.debug("Rejected version %r at offset %d", text, exc.offset)
        raise

    return Version(major, minor, patch, prerelease, build)


def _identifiers(text: str, start: int, stop: int, *, strict: bool) -> tuple[str, ...]:
    try:
        return split_identifiers(text[start:stop], strict=strict)
    except InvalidVersion as exc:
        raise InvalidVersion(text, start + exc.offset) from exc
