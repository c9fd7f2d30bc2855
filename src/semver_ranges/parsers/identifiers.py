"""Parse dot-separated prerelease and build metadata identifiers."""

from __future__ import annotations

from ..errors import InvalidVersion
from ..models.identifiers import IDENTIFIER_RE, BuildMetadata, Prerelease, is_numeric


def split_identifiers(text: str, *, strict: bool = False) -> tuple[str, ...]:
    """Split ``text`` on dots, validating every identifier.

    Raises InvalidVersion with the offset of the first bad identifier relative
    to ``text``. In strict mode numeric identifiers may not carry leading zeros.
    """
    identifiers: list[str] = []
    offset = 0
    for ident in text.split("."):
        if not IDENTIFIER_RE.fullmatch(ident):
            raise InvalidVersion(text, offset)
        if strict and is_numeric(ident) and len(ident) > 1 and ident.startswith("0"):
            raise InvalidVersion(text, offset)
        identifiers.append(ident)
        offset += len(ident) + 1
    return tuple(identifiers)


def parse_prerelease(text: str, *, strict: bool | None = None) -> Prerelease:
    if strict is None:
        from ..settings import get_settings

        strict = get_settings().strict
    return Prerelease(split_identifiers(text, strict=strict))


def parse_build_metadata(text: str) -> BuildMetadata:
    # Leading zeros are always allowed in build metadata.
    return BuildMetadata(split_identifiers(text))
