"""Conversion to and from ``packaging.version.Version`` (PEP 440).

Only the common subset maps cleanly: up to three release components, an
optional ``aN``/``bN``/``rcN`` prerelease and a local segment, which becomes
build metadata. Epochs, post releases and dev releases order differently from
anything a semver prerelease can express and are rejected.
"""

from __future__ import annotations

from packaging.version import InvalidVersion as PackagingInvalidVersion
from packaging.version import Version as PackagingVersion

from .errors import InvalidVersion
from .models.identifiers import BuildMetadata, Prerelease
from .models.version import Version

_PRE_NAMES = {"a": "alpha", "b": "beta", "rc": "rc"}
_PRE_LETTERS = {name: letter for letter, name in _PRE_NAMES.items()}


def from_packaging(version: PackagingVersion) -> Version:
    text = str(version)
    if version.epoch or version.post is not None or version.dev is not None:
        raise InvalidVersion(text)
    if len(version.release) > 3:
        raise InvalidVersion(text)

    major, minor, patch = (tuple(version.release) + (0, 0, 0))[:3]

    prerelease = Prerelease()
    if version.pre is not None:
        letter, number = version.pre
        prerelease = Prerelease((_PRE_NAMES[letter], str(number)))

    build = BuildMetadata()
    if version.local:
        build = BuildMetadata(tuple(version.local.split(".")))

    return Version(major, minor, patch, prerelease, build)


def to_packaging(version: Version) -> PackagingVersion:
    text = f"{version.major}.{version.minor}.{version.patch}"

    identifiers = version.prerelease.identifiers
    if identifiers:
        if (
            len(identifiers) != 2
            or identifiers[0] not in _PRE_LETTERS
            or not identifiers[1].isdigit()
        ):
            raise InvalidVersion(str(version))
        text += f"{_PRE_LETTERS[identifiers[0]]}{int(identifiers[1])}"

    if version.build_metadata:
        text += f"+{version.build_metadata}"

    try:
        return PackagingVersion(text)
    except PackagingInvalidVersion as exc:
        raise InvalidVersion(str(version)) from exc
