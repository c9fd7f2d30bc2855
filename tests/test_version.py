from __future__ import annotations

import itertools

import pytest

from semver_ranges import (
    COMPONENT_MAX,
    MAX_VERSION,
    BuildMetadata,
    InvalidVersion,
    Order,
    Prerelease,
    Version,
    compare,
)
from semver_ranges.settings import Settings, set_settings

PRECEDENCE_CHAIN = [
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-alpha.beta",
    "1.0.0-beta",
    "1.0.0-beta.2",
    "1.0.0-beta.11",
    "1.0.0-rc.1",
    "1.0.0",
    "1.0.1",
    "1.1.0",
    "2.0.0",
]


def test_parse_components():
    v = Version.parse("1.2.3-alpha.1+001.sha-5")
    assert (v.major, v.minor, v.patch) == (1, 2, 3)
    assert v.prerelease == Prerelease(("alpha", "1"))
    assert v.build_metadata == BuildMetadata(("001", "sha-5"))
    assert v.is_prerelease


@pytest.mark.parametrize(
    "text",
    ["0.0.0", "1.2.3", "1.2.3-alpha", "1.2.3-alpha.1.x-y", "1.2.3+build.7", "10.20.30-rc.1+exp"],
)
def test_round_trip(text):
    v = Version.parse(text)
    assert str(v) == text
    assert Version.parse(str(v)) == v


@pytest.mark.parametrize(
    "text, offset",
    [
        ("", 0),
        ("1", 1),
        ("1.2", 3),
        ("1.x.3", 2),
        ("1.2.", 4),
        ("v1.2.3", 0),
        ("1.2.3 ", 5),
        ("1.2.3-", 6),
        ("1.2.3+", 6),
        ("1.2.3-alpha..1", 12),
        ("1.2.3-al_pha", 6),
        ("1.2.3+build.", 12),
    ],
)
def test_invalid_version_reports_offset(text, offset):
    with pytest.raises(InvalidVersion) as exc:
        Version.parse(text)
    assert exc.value.string == text
    assert exc.value.offset == offset
    assert "Invalid semantic version" in str(exc.value)


def test_component_at_sentinel_rejected():
    with pytest.raises(InvalidVersion):
        Version.parse(f"{COMPONENT_MAX}.0.0")


def test_leading_zeros_allowed_by_default():
    assert Version.parse("01.002.3") == Version(1, 2, 3)
    assert Version.parse("1.0.0-01") == Version.parse("1.0.0-1")


@pytest.mark.parametrize("text, offset", [("01.2.3", 0), ("1.02.3", 2), ("1.2.3-rc.01", 9)])
def test_strict_rejects_leading_zeros(text, offset):
    with pytest.raises(InvalidVersion) as exc:
        Version.parse(text, strict=True)
    assert exc.value.offset == offset


def test_strict_from_settings():
    set_settings(Settings(strict=True))
    with pytest.raises(InvalidVersion):
        Version.parse("1.2.03")
    # Build metadata is exempt.
    assert Version.parse("1.2.3+007").build_metadata == BuildMetadata(("007",))


def test_precedence_chain():
    versions = [Version.parse(text) for text in PRECEDENCE_CHAIN]
    assert sorted(reversed(versions)) == versions


def test_total_order():
    versions = [Version.parse(text) for text in PRECEDENCE_CHAIN]
    for (i, a), (j, b) in itertools.product(enumerate(versions), repeat=2):
        outcomes = [a < b, a == b, a > b]
        assert outcomes.count(True) == 1
        assert compare(a, b) is Order.of(i, j)
        assert (a <= b) == (i <= j)
        assert (a >= b) == (i >= j)
        assert (a != b) == (i != j)


def test_release_beats_prerelease():
    assert Version.parse("1.0.0") > Version.parse("1.0.0-alpha")
    assert Version.parse("1.0.0-alpha") < Version.parse("1.0.0")


def test_numeric_components_compare_numerically():
    assert Version.parse("1.10.0") > Version.parse("1.9.0")
    assert Version.parse("1.0.0-rc.10") > Version.parse("1.0.0-rc.9")


def test_build_metadata_ignored_by_equality_and_hash():
    a = Version.parse("1.0.0+a")
    b = Version.parse("1.0.0+b")
    assert a == b
    assert not a < b and not a > b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_next_after_drops_prerelease_and_build():
    assert Version.parse("1.2.3").next_after() == Version(1, 2, 4)
    nxt = Version.parse("1.2.3-beta+exp").next_after()
    assert str(nxt) == "1.2.4"


def test_max_version_sorts_above_parsed_versions():
    assert MAX_VERSION > Version.parse(f"{COMPONENT_MAX - 1}.{COMPONENT_MAX - 1}.0")
    assert MAX_VERSION > Version.parse("999999.0.0")


def test_direct_construction_validates():
    with pytest.raises(ValueError):
        Version(-1, 0, 0)
    with pytest.raises(ValueError):
        Version(1, "2", 3)
    with pytest.raises(ValueError):
        Version(1, 2, 3, Prerelease(("bad!",)))


def test_prerelease_compare_rules():
    empty = Prerelease()
    alpha = Prerelease.parse("alpha")
    assert empty.compare(alpha) is Order.GREATER
    assert alpha.compare(empty) is Order.LESS
    assert empty.compare(Prerelease()) is Order.EQUAL
    assert Prerelease.parse("1").compare(Prerelease.parse("a")) is Order.LESS
    assert Prerelease.parse("alpha").compare(Prerelease.parse("alpha.0")) is Order.LESS
    assert Prerelease.parse("Beta").compare(Prerelease.parse("alpha")) is Order.LESS


def test_comparison_with_other_types():
    assert Version.parse("1.0.0") != "1.0.0"
    with pytest.raises(TypeError):
        Version.parse("1.0.0") < "1.0.0"


def test_build_metadata_parse_reports_offset():
    with pytest.raises(InvalidVersion) as exc:
        BuildMetadata.parse("a..b")
    assert exc.value.string == "a..b"
    assert exc.value.offset == 2


def test_build_metadata_parse_ignores_strict():
    set_settings(Settings(strict=True))
    assert BuildMetadata.parse("001") == BuildMetadata(("001",))
    assert str(BuildMetadata.parse("sha.5114f85")) == "sha.5114f85"
