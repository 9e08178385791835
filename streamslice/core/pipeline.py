"""
Slicing pipeline: parse, open, resolve, extract.

``slice_stream`` is the single entry point used by the CLI. It never touches
the input before the range text has parsed, resolves the range exactly once,
and closes named inputs on every exit path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from loguru import logger

from ..datastructures.range_spec import RangeIntent, ResolvedRange, Unit
from ..datastructures.type_aliases import InputPath, RangeText, UnitCount
from .config import SliceSettings
from .errors import SliceIOError
from .extractor import count_units, extract
from .input_source import InputSource, open_input_source
from .range_parser import parse_range
from .replay_buffer import ReplayBuffer
from .resolver import ResolutionStrategy, choose_strategy, resolve


@dataclass(frozen=True, slots=True)
class SliceReport:
    """What a slicing run decided and did."""

    intent: RangeIntent
    unit: Unit
    strategy: ResolutionStrategy
    resolved: ResolvedRange
    total: UnitCount | None
    units_written: UnitCount


def slice_source(
    intent: RangeIntent,
    source: InputSource,
    sink: BinaryIO,
    *,
    unit: Unit = Unit.LINE,
    settings: SliceSettings | None = None,
) -> SliceReport:
    """Resolve ``intent`` against an already opened ``source`` and extract it."""
    settings = settings or SliceSettings()
    chunk_size = settings.chunk_size

    strategy = choose_strategy(intent, unit, source)
    logger.debug("Range {} on {} uses strategy {}", intent, source.name, strategy.value)

    replay: ReplayBuffer | None = None
    match strategy:
        case ResolutionStrategy.STREAM:
            total = None
        case ResolutionStrategy.LENGTH_QUERY:
            total = source.known_length(unit)
        case ResolutionStrategy.COUNT_AND_REWIND:
            total = count_units(source, unit, chunk_size)
        case ResolutionStrategy.COUNT_AND_BUFFER:
            replay = ReplayBuffer.for_intent(intent, unit)
            total = replay.fill(source, chunk_size)

    resolved = resolve(intent, total)
    logger.debug("Resolved {} against total={} to {}", intent, total, resolved)

    written = extract(
        source,
        resolved,
        unit,
        sink,
        strategy=strategy,
        replay=replay,
        chunk_size=chunk_size,
    )
    try:
        sink.flush()
    except OSError as e:
        raise SliceIOError(f"output: {e.strerror or e}", stage="write") from e

    return SliceReport(
        intent=intent,
        unit=unit,
        strategy=strategy,
        resolved=resolved,
        total=total,
        units_written=written,
    )


def slice_stream(
    range_text: RangeText,
    sink: BinaryIO,
    *,
    input_path: InputPath | None = None,
    unit: Unit = Unit.LINE,
    stdin: BinaryIO | None = None,
    settings: SliceSettings | None = None,
) -> SliceReport:
    """Write the ``range_text`` slice of ``input_path`` (or stdin) to ``sink``.

    Raises:
        InvalidRangeError: ``range_text`` is malformed; nothing is opened or written.
        SliceIOError: the input cannot be opened or read, or the sink fails.
        ResourceExhaustedError: buffering a stream ran out of memory.
    """
    intent = parse_range(range_text)
    with open_input_source(input_path, stdin=stdin) as source:
        return slice_source(intent, source, sink, unit=unit, settings=settings)
