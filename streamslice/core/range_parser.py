"""Parser for ``[start]:[end]`` range expressions."""

from __future__ import annotations

import re

from loguru import logger

from ..datastructures.range_spec import AbsoluteEnd, EndSpec, RangeIntent, RelativeEnd
from ..datastructures.type_aliases import RangeText
from .errors import InvalidRangeError

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")


def _parse_signed(range_text: RangeText, token: str, what: str) -> int:
    if not _SIGNED_INT.fullmatch(token):
        raise InvalidRangeError(range_text, f"{what} {token!r} is not an integer")
    return int(token)


def _parse_end(range_text: RangeText, token: str) -> EndSpec:
    if not token:
        return AbsoluteEnd()
    if token.startswith("+"):
        length = token[1:]
        if not _UNSIGNED_INT.fullmatch(length):
            raise InvalidRangeError(
                range_text, f"relative length {token!r} must be +N with N >= 0"
            )
        return RelativeEnd(int(length))
    return AbsoluteEnd(_parse_signed(range_text, token, "end"))


def parse_range(range_text: RangeText) -> RangeIntent:
    """Parse a range expression into a ``RangeIntent``.

    Only syntax is checked; ``"5:2"`` parses fine and later resolves to an
    empty range.

    Raises:
        InvalidRangeError: missing or repeated ``:``, or an endpoint that is
            not an integer / ``+N`` length.
    """
    if range_text.count(":") != 1:
        raise InvalidRangeError(range_text, "expected exactly one ':' separator")

    start_token, end_token = range_text.split(":")
    start = (
        _parse_signed(range_text, start_token, "start") if start_token else None
    )
    intent = RangeIntent(start=start, end=_parse_end(range_text, end_token))
    logger.debug("Parsed range {!r} as {!r}", range_text, intent)
    return intent
