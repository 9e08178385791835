"""
streamslice core module.

Range parsing, input sources, resolution strategies and extraction.
"""

from .config import SliceSettings
from .errors import (
    InvalidRangeError,
    ResourceExhaustedError,
    SliceError,
    SliceIOError,
)
from .extractor import count_units, extract
from .input_source import InputSource, SourceKind, open_input_source
from .pipeline import SliceReport, slice_source, slice_stream
from .range_parser import parse_range
from .replay_buffer import ReplayBuffer
from .resolver import ResolutionStrategy, choose_strategy, needs_total, resolve

__all__ = [
    "InputSource",
    "InvalidRangeError",
    "ReplayBuffer",
    "ResolutionStrategy",
    "ResourceExhaustedError",
    "SliceError",
    "SliceIOError",
    "SliceReport",
    "SliceSettings",
    "SourceKind",
    "choose_strategy",
    "count_units",
    "extract",
    "needs_total",
    "open_input_source",
    "parse_range",
    "resolve",
    "slice_source",
    "slice_stream",
]
