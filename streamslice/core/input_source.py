"""
Input source abstraction.

An ``InputSource`` wraps a binary stream together with what it can do:
regular files and block devices can be rewound and report their byte length
without being read, while standard input and pipes can only be read forward
once and never know their length up front.

Only two kinds exist, so callers branch on ``SourceKind`` (or the
``seekable`` property) rather than subclassing.
"""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from loguru import logger

from ..datastructures.range_spec import Unit
from ..datastructures.type_aliases import ByteCount, ChunkSize, InputPath, UnitPayload
from .errors import SliceIOError

STDIN_PATH = "-"
DEFAULT_CHUNK_SIZE: ChunkSize = 64 * 1024


class SourceKind(Enum):
    """Capabilities of an input."""

    FILE = "file"  # seekable, byte length known in O(1)
    STREAM = "stream"  # forward-only, length unknown until EOF


@contextmanager
def _reading(name: str) -> Iterator[None]:
    try:
        yield
    except OSError as e:
        raise SliceIOError(f"{name}: {e.strerror or e}", stage="read") from e


@dataclass(slots=True)
class InputSource:
    """Uniform read surface over a named file or standard input."""

    stream: BinaryIO
    kind: SourceKind
    name: str
    owns_stream: bool = True

    @property
    def seekable(self) -> bool:
        return self.kind is SourceKind.FILE

    def known_length(self, unit: Unit) -> ByteCount | None:
        """Total size in ``unit`` if it can be had without reading the input.

        Only the byte length of a seekable source qualifies; line counts always
        need a scan.
        """
        if unit is not Unit.BYTE or not self.seekable:
            return None
        with _reading(self.name):
            position = self.stream.tell()
            size = self.stream.seek(0, os.SEEK_END)
            self.stream.seek(position)
        return size

    def read_next_unit(self, unit: Unit) -> UnitPayload | None:
        """Next line (terminator included) or next byte; ``None`` at EOF."""
        with _reading(self.name):
            data = self.stream.readline() if unit is Unit.LINE else self.stream.read(1)
        return data or None

    def iter_units(self, unit: Unit) -> Iterator[UnitPayload]:
        while (data := self.read_next_unit(unit)) is not None:
            yield data

    def read_chunk(self, size: ChunkSize = DEFAULT_CHUNK_SIZE) -> bytes:
        with _reading(self.name):
            return self.stream.read(size)

    def iter_chunks(self, size: ChunkSize = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
        while chunk := self.read_chunk(size):
            yield chunk

    def rewind(self) -> None:
        self.seek_to(0)

    def seek_to(self, offset: ByteCount) -> None:
        if not self.seekable:
            raise SliceIOError(f"{self.name}: input is not seekable", stage="read")
        with _reading(self.name):
            self.stream.seek(offset)

    def close(self) -> None:
        if self.owns_stream:
            self.stream.close()


def _kind_for_mode(mode: int) -> SourceKind:
    if stat.S_ISREG(mode) or stat.S_ISBLK(mode):
        return SourceKind.FILE
    return SourceKind.STREAM


def _open_path(path: InputPath) -> InputSource:
    try:
        stream = open(path, "rb")
    except IsADirectoryError as e:
        raise SliceIOError(f"{path}: input is a directory", stage="open") from e
    except OSError as e:
        raise SliceIOError(f"{path}: {e.strerror or e}", stage="open") from e

    try:
        mode = os.fstat(stream.fileno()).st_mode
    except OSError as e:
        stream.close()
        raise SliceIOError(f"{path}: {e.strerror or e}", stage="open") from e

    if stat.S_ISDIR(mode):
        stream.close()
        raise SliceIOError(f"{path}: input is a directory", stage="open")

    return InputSource(stream=stream, kind=_kind_for_mode(mode), name=path)


@contextmanager
def open_input_source(
    path: InputPath | None = None, stdin: BinaryIO | None = None
) -> Iterator[InputSource]:
    """Open ``path`` (or standard input for ``None``/``"-"``) as an ``InputSource``.

    Standard input is always treated as a forward-only stream, whatever
    the underlying descriptor happens to support, and it is left open on exit.
    Named files are closed on every exit path.
    """
    if path is None or path == STDIN_PATH:
        source = InputSource(
            stream=stdin if stdin is not None else sys.stdin.buffer,
            kind=SourceKind.STREAM,
            name="<stdin>",
            owns_stream=False,
        )
    else:
        source = _open_path(path)

    logger.debug("Opened {} as {}", source.name, source.kind.value)
    try:
        yield source
    finally:
        source.close()
