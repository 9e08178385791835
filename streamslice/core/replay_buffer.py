"""
Replay buffer for length-dependent ranges on forward-only inputs.

A stream cannot be rewound, so the pass that counts it also has to keep what
the extraction pass will emit. Only units that can end up in the result are
retained:

* with a non-negative start, everything before the start is dropped;
* with a negative start ``-k``, only the trailing ``k`` units are kept (in byte
  mode rounded up to whole chunks).

What remains, for instance everything after ``start`` for ``"3:-2"``, is held
in memory with no cap.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from loguru import logger

from ..datastructures.range_spec import RangeIntent, Unit
from ..datastructures.type_aliases import ChunkSize, UnitCount, UnitIndex
from .errors import ResourceExhaustedError
from .input_source import DEFAULT_CHUNK_SIZE, InputSource


@dataclass(slots=True)
class ReplayBuffer:
    """Retained tail of a stream, addressable by absolute unit index."""

    unit: Unit
    keep_from: UnitIndex | None = None
    window: UnitCount | None = None
    total: UnitCount = 0
    base: UnitIndex = 0
    retained: UnitCount = 0
    _pieces: deque[tuple[bytes, UnitCount]] = field(default_factory=deque)

    def __post_init__(self) -> None:
        if self.window is not None and self.window <= 0:
            raise ValueError(f"Window must be positive, got {self.window}")

    @classmethod
    def for_intent(cls, intent: RangeIntent, unit: Unit) -> ReplayBuffer:
        if intent.start is not None and intent.start < 0:
            return cls(unit=unit, window=-intent.start)
        return cls(unit=unit, keep_from=intent.start or 0)

    def append(self, piece: bytes, units: UnitCount) -> None:
        first = self.total
        self.total += units

        if self.keep_from is not None and first < self.keep_from:
            skip = self.keep_from - first
            if skip >= units:
                self.base = self.total
                return
            # Only byte chunks can straddle keep_from.
            piece = piece[skip:]
            units -= skip
            first = self.keep_from

        if not self._pieces:
            self.base = first
        self._pieces.append((piece, units))
        self.retained += units

        if self.window is not None:
            while self._pieces and self.retained - self._pieces[0][1] >= self.window:
                _, dropped = self._pieces.popleft()
                self.retained -= dropped
                self.base += dropped

    def fill(
        self, source: InputSource, chunk_size: ChunkSize = DEFAULT_CHUNK_SIZE
    ) -> UnitCount:
        """Read ``source`` to EOF, keeping what may be replayed. Returns the total."""
        try:
            if self.unit is Unit.LINE:
                for line in source.iter_units(Unit.LINE):
                    self.append(line, 1)
            else:
                for chunk in source.iter_chunks(chunk_size):
                    self.append(chunk, len(chunk))
        except MemoryError as e:
            raise ResourceExhaustedError(
                f"{source.name}: out of memory after buffering {self.retained} "
                f"{self.unit.value}s of {self.total} read"
            ) from e

        logger.debug(
            "Buffered {} of {} {}s from {} (base={})",
            self.retained,
            self.total,
            self.unit.value,
            source.name,
            self.base,
        )
        return self.total

    def replay(self, lo: UnitIndex, hi: UnitIndex) -> Iterator[bytes]:
        """Yield the retained data covering units ``[lo, hi)``."""
        if lo < self.base and lo < hi:
            raise ValueError(f"Units before {self.base} were not retained (lo={lo})")

        index = self.base
        for piece, units in self._pieces:
            if index >= hi:
                break
            end = index + units
            if end > lo:
                if self.unit is Unit.BYTE:
                    yield piece[max(lo - index, 0) : min(hi, end) - index]
                else:
                    yield piece
            index = end
