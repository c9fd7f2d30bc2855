"""Parse version range strings.

Supported expressions:
- ``*`` → anything from 0.0.0 up
- exact versions, bare (``1.2.3``) or with ``=`` (``=1.2.3``)
- tilde ranges ``~x.y.z`` → >=x.y.z,<x.y+1.0
- caret ranges ``^x.y.z`` → >=x.y.z,<x+1.0.0
- open ranges ``+x.y.z`` → >=x.y.z
- explicit intervals ``low<high`` (``parse_interval`` only)
"""

from __future__ import annotations

import logging

from ..errors import InvalidRange
from ..models.interval import Interval
from ..models.range import Range, RangeKind
from ..models.version import Version
from .version import parse as parse_version

logger = logging.getLogger(__name__)


def parse(text: str) -> Range:
    """Return the Range for ``text``.

    Raises:
        InvalidRange: for an empty string or an unknown prefix character.
        InvalidVersion: when the text after the prefix is not a version.
    """
    if text == "*":
        return Range.everything()
    if not text:
        logger.debug("Rejected empty range string")
        raise InvalidRange(text)

    head = text[0]
    if "0" <= head <= "9":
        return Range(parse_version(text), RangeKind.EXACT)

    kind = RangeKind.from_prefix(head)
    if kind is None:
        logger.debug("Rejected range %r: unknown prefix %r", text, head)
        raise InvalidRange(text)

    rest = text[1:]
    if not rest:
        raise InvalidRange(text)
    return Range(parse_version(rest), kind)


def parse_interval(text: str) -> Interval:
    """Return the Interval for ``low<high`` or any expression ``parse`` accepts.

    Raises:
        InvalidRange: when ``high`` is not strictly greater than ``low``.
    """
    low_text, sep, high_text = text.partition("<")
    if not sep:
        return parse(text).to_interval()

    low: Version = parse_version(low_text)
    high: Version = parse_version(high_text)
    if high <= low:
        logger.debug("Rejected interval %r: high is not above low", text)
        raise InvalidRange(text)
    return Interval(low, high)
