"""
streamslice - slice lines or bytes out of files and pipes

Selects one contiguous span of an input with a Python-slice-like range
and writes exactly that span to an output stream: ``head``, ``tail`` and
offset/length extraction in one filter.

## Architecture

- **datastructures**: ``Unit``, ``RangeIntent`` and ``ResolvedRange``
- **core**: range parsing, input sources, resolution strategies, extraction
- **cli**: the ``streamslice`` command

## Quick Start

```python
import sys

from streamslice import Unit, slice_stream

# Last ten lines of a log file
slice_stream("-10:", sys.stdout.buffer, input_path="server.log")

# 16 bytes starting at offset 512
slice_stream("512:+16", sys.stdout.buffer, input_path="image.bin", unit=Unit.BYTE)
```

## Memory

Ranges of the "skip N, take M" kind stream in one pass. Ranges anchored on
the end of input need the input length: files are counted and rewound,
pipes are buffered (only the part that can still be emitted is kept).
"""

from .core import (
    InputSource,
    InvalidRangeError,
    ResolutionStrategy,
    ResourceExhaustedError,
    SliceError,
    SliceIOError,
    SliceReport,
    SliceSettings,
    SourceKind,
    open_input_source,
    parse_range,
    resolve,
    slice_source,
    slice_stream,
)
from .datastructures import (
    AbsoluteEnd,
    RangeIntent,
    RelativeEnd,
    ResolvedRange,
    Unit,
)

# Version info
__version__ = "0.3.0"
__license__ = "MIT"

__all__ = [
    # Datastructures
    "AbsoluteEnd",
    "RangeIntent",
    "RelativeEnd",
    "ResolvedRange",
    "Unit",
    # Core
    "InputSource",
    "SourceKind",
    "ResolutionStrategy",
    "SliceReport",
    "SliceSettings",
    "open_input_source",
    "parse_range",
    "resolve",
    "slice_source",
    "slice_stream",
    # Errors
    "InvalidRangeError",
    "ResourceExhaustedError",
    "SliceError",
    "SliceIOError",
]
