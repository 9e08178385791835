"""
Index resolution for range intents.

Resolution turns a ``RangeIntent`` into a ``ResolvedRange``. Whether the
input length is needed, and how it will be learned, decides how the input is
read:

* ``STREAM`` -- the range is "skip N, take M"; no length needed, one pass.
* ``LENGTH_QUERY`` -- the length is needed and the source reports it for free
  (byte mode on a seekable file).
* ``COUNT_AND_REWIND`` -- the length is needed and must be counted; the
  source is seekable so the extraction pass starts over with a seek.
* ``COUNT_AND_BUFFER`` -- as above on a forward-only stream; the counting pass
  keeps what it read so the extraction pass can replay it.
"""

from __future__ import annotations

import sys
from enum import Enum

from ..datastructures.range_spec import (
    AbsoluteEnd,
    RangeIntent,
    RelativeEnd,
    ResolvedRange,
    Unit,
)
from ..datastructures.type_aliases import UnitCount, UnitIndex
from .input_source import InputSource

# Largest index islice and seek accept; EOF comes long before it.
MAX_UNIT_INDEX: UnitIndex = sys.maxsize


class ResolutionStrategy(Enum):
    """How the input is read to resolve and extract a range."""

    STREAM = "stream"
    LENGTH_QUERY = "length_query"
    COUNT_AND_REWIND = "count_and_rewind"
    COUNT_AND_BUFFER = "count_and_buffer"

    @property
    def counts_input(self) -> bool:
        return self in (
            ResolutionStrategy.COUNT_AND_REWIND,
            ResolutionStrategy.COUNT_AND_BUFFER,
        )


def needs_total(intent: RangeIntent) -> bool:
    """True when the range cannot be resolved without the input length."""
    if intent.has_negative_start:
        return True
    match intent.end:
        case AbsoluteEnd(index=None):
            return False
        case AbsoluteEnd(index=index):
            return index < 0
        case RelativeEnd():
            return False


def choose_strategy(
    intent: RangeIntent, unit: Unit, source: InputSource
) -> ResolutionStrategy:
    if not needs_total(intent):
        return ResolutionStrategy.STREAM
    if source.known_length(unit) is not None:
        return ResolutionStrategy.LENGTH_QUERY
    if source.seekable:
        return ResolutionStrategy.COUNT_AND_REWIND
    return ResolutionStrategy.COUNT_AND_BUFFER


def _resolve_unbounded(intent: RangeIntent) -> ResolvedRange:
    lo = min(max(intent.start or 0, 0), MAX_UNIT_INDEX)
    match intent.end:
        case AbsoluteEnd(index=None):
            return ResolvedRange(lo=lo, hi=None)
        case AbsoluteEnd(index=index):
            return ResolvedRange(lo=lo, hi=min(max(index, lo), MAX_UNIT_INDEX))
        case RelativeEnd(length=length):
            return ResolvedRange(lo=lo, hi=min(lo + length, MAX_UNIT_INDEX))


def resolve(intent: RangeIntent, total: UnitCount | None = None) -> ResolvedRange:
    """Resolve ``intent`` against an input of ``total`` units.

    With ``total=None`` the intent must not need the length (see
    ``needs_total``); the returned range is then bounded by the end of input
    rather than by ``total``.

    Raises:
        ValueError: ``total`` is missing but required, or negative.
    """
    if total is None:
        if needs_total(intent):
            raise ValueError(f"Range {intent} needs the input length to resolve")
        return _resolve_unbounded(intent)
    if total < 0:
        raise ValueError(f"Total must be non-negative, got {total}")

    start = intent.start or 0
    lo = max(total + start, 0) if start < 0 else min(start, total)

    match intent.end:
        case AbsoluteEnd(index=None):
            hi = total
        case AbsoluteEnd(index=index):
            hi = total + index if index < 0 else index
        case RelativeEnd(length=length):
            hi = lo + length

    return ResolvedRange(lo=lo, hi=max(lo, min(hi, total)))
