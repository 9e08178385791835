"""Shared helpers for streamslice tests: input builders and a list-slicing oracle."""

import io
import tempfile
from pathlib import Path

from streamslice.core.config import SliceSettings
from streamslice.core.input_source import SourceKind
from streamslice.core.pipeline import SliceReport, slice_stream
from streamslice.datastructures.range_spec import (
    AbsoluteEnd,
    RangeIntent,
    RelativeEnd,
    Unit,
)


def numbered_lines(
    last: int, first: int = 1, *, trailing_newline: bool = True
) -> bytes:
    """``b"1\\n2\\n...last\\n"``, optionally without the final newline."""
    data = b"".join(b"%d\n" % n for n in range(first, last + 1))
    if not trailing_newline:
        data = data.removesuffix(b"\n")
    return data


def units_of(data: bytes, unit: Unit) -> list[bytes]:
    """Split into lines (``\\n`` only, terminators kept) or single bytes."""
    if unit is Unit.BYTE:
        return [data[i : i + 1] for i in range(len(data))]
    *complete, tail = data.split(b"\n")
    lines = [line + b"\n" for line in complete]
    if tail:
        lines.append(tail)
    return lines


def expected_slice(data: bytes, intent: RangeIntent, unit: Unit) -> bytes:
    """What slicing ``data`` by ``intent`` should produce, computed with list slices."""
    units = units_of(data, unit)
    match intent.end:
        case AbsoluteEnd(index=index):
            selected = units[intent.start : index]
        case RelativeEnd(length=length):
            lo, _, _ = slice(intent.start, None).indices(len(units))
            selected = units[lo : lo + length]
    return b"".join(selected)


def run_slice(
    data: bytes,
    range_text: str,
    *,
    unit: Unit = Unit.LINE,
    kind: SourceKind = SourceKind.FILE,
    settings: SliceSettings | None = None,
) -> tuple[bytes, SliceReport]:
    """Slice ``data`` from a temp file (FILE) or a stdin replacement (STREAM)."""
    sink = io.BytesIO()
    if kind is SourceKind.FILE:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "input.bin"
            path.write_bytes(data)
            report = slice_stream(
                range_text, sink, input_path=str(path), unit=unit, settings=settings
            )
    else:
        report = slice_stream(
            range_text, sink, unit=unit, stdin=io.BytesIO(data), settings=settings
        )
    return sink.getvalue(), report
