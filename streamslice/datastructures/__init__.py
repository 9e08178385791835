"""
streamslice datastructures.

Key datastructures:
- Unit: line or byte granularity
- RangeIntent / AbsoluteEnd / RelativeEnd: parsed range expressions
- ResolvedRange: concrete half-open interval handed to the extractor
"""

from __future__ import annotations

from .range_spec import (
    AbsoluteEnd,
    EndSpec,
    RangeIntent,
    RelativeEnd,
    ResolvedRange,
    Unit,
    end_spec_strategy,
    range_intent_strategy,
    streamable_intent_strategy,
)

__all__ = [
    "AbsoluteEnd",
    "EndSpec",
    "RangeIntent",
    "RelativeEnd",
    "ResolvedRange",
    "Unit",
    "end_spec_strategy",
    "range_intent_strategy",
    "streamable_intent_strategy",
]
