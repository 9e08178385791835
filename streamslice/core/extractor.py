"""
Extraction of a resolved range from an input source.

The extractor emits exactly the units in ``[lo, hi)`` to a binary sink, in
order, and stops reading once ``hi`` is reached. Lines are emitted with
their terminator as read; an unterminated last line stays unterminated.
Bytes move in chunks.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import BinaryIO

from loguru import logger

from ..datastructures.range_spec import ResolvedRange, Unit
from ..datastructures.type_aliases import ChunkSize, UnitCount
from .errors import SliceIOError
from .input_source import DEFAULT_CHUNK_SIZE, InputSource
from .replay_buffer import ReplayBuffer
from .resolver import ResolutionStrategy


def count_units(
    source: InputSource, unit: Unit, chunk_size: ChunkSize = DEFAULT_CHUNK_SIZE
) -> UnitCount:
    """Read ``source`` to EOF and return its length in ``unit``.

    A trailing record without a newline still counts as a line.
    """
    total = 0
    last = b""
    for chunk in source.iter_chunks(chunk_size):
        total += len(chunk) if unit is Unit.BYTE else chunk.count(b"\n")
        last = chunk
    if unit is Unit.LINE and last and not last.endswith(b"\n"):
        total += 1
    logger.debug("Counted {} {}s in {}", total, unit.value, source.name)
    return total


class _Emitter:
    def __init__(self, sink: BinaryIO) -> None:
        self.sink = sink
        self.written = 0

    def write(self, data: bytes, units: UnitCount) -> None:
        try:
            self.sink.write(data)
        except OSError as e:
            raise SliceIOError(f"output: {e.strerror or e}", stage="write") from e
        self.written += units

    def write_all(self, pieces: Iterable[bytes], unit: Unit) -> None:
        for piece in pieces:
            self.write(piece, 1 if unit is Unit.LINE else len(piece))


def _skip_bytes(source: InputSource, count: UnitCount, chunk_size: ChunkSize) -> bool:
    """Discard ``count`` bytes; False if EOF came first."""
    if source.seekable:
        size = source.known_length(Unit.BYTE) or 0
        source.seek_to(min(count, size))
        return count < size
    while count > 0:
        chunk = source.read_chunk(min(chunk_size, count))
        if not chunk:
            return False
        count -= len(chunk)
    return True


def _extract_bytes(
    source: InputSource,
    resolved: ResolvedRange,
    emitter: _Emitter,
    chunk_size: ChunkSize,
) -> None:
    if not _skip_bytes(source, resolved.lo, chunk_size):
        return

    remaining = resolved.length
    while remaining is None or remaining > 0:
        size = chunk_size if remaining is None else min(chunk_size, remaining)
        chunk = source.read_chunk(size)
        if not chunk:
            return
        emitter.write(chunk, len(chunk))
        if remaining is not None:
            remaining -= len(chunk)


def extract(
    source: InputSource,
    resolved: ResolvedRange,
    unit: Unit,
    sink: BinaryIO,
    *,
    strategy: ResolutionStrategy = ResolutionStrategy.STREAM,
    replay: ReplayBuffer | None = None,
    chunk_size: ChunkSize = DEFAULT_CHUNK_SIZE,
) -> UnitCount:
    """Write the units of ``resolved`` from ``source`` to ``sink``.

    ``strategy`` says what happened to the source before this call:
    after ``COUNT_AND_REWIND`` the source is rewound first, after
    ``COUNT_AND_BUFFER`` the data comes from ``replay`` instead of the
    (exhausted) source.

    Returns:
        Number of units written.
    """
    if strategy is ResolutionStrategy.COUNT_AND_BUFFER and replay is None:
        raise ValueError("COUNT_AND_BUFFER extraction needs a replay buffer")

    emitter = _Emitter(sink)
    if resolved.is_empty:
        logger.debug("Range {} is empty, nothing to extract", resolved)
        return 0

    if strategy is ResolutionStrategy.COUNT_AND_BUFFER:
        if replay is None or resolved.hi is None:
            raise ValueError(
                f"Buffered extraction needs a bounded range, got {resolved}"
            )
        emitter.write_all(replay.replay(resolved.lo, resolved.hi), unit)
    else:
        if strategy is ResolutionStrategy.COUNT_AND_REWIND:
            source.rewind()
        if unit is Unit.LINE:
            emitter.write_all(
                islice(source.iter_units(Unit.LINE), resolved.lo, resolved.hi), unit
            )
        else:
            _extract_bytes(source, resolved, emitter, chunk_size)

    logger.debug(
        "Extracted {} {}s for {} from {}",
        emitter.written,
        unit.value,
        resolved,
        source.name,
    )
    return emitter.written
