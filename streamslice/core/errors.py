"""
Error taxonomy for streamslice.

Every failure is terminal for the invocation. Each error records the
pipeline stage it came from so the CLI can say where things went wrong.
"""

from __future__ import annotations

from typing import Literal

type SliceStage = Literal["parse", "open", "read", "write", "buffer"]


class SliceError(Exception):
    """Base exception for slicing failures."""

    def __init__(self, message: str, *, stage: SliceStage) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class InvalidRangeError(SliceError):
    """Raised when a range expression does not match ``[start]:[end]``."""

    def __init__(self, range_text: str, reason: str) -> None:
        super().__init__(f"invalid range {range_text!r}: {reason}", stage="parse")
        self.range_text = range_text
        self.reason = reason


class SliceIOError(SliceError):
    """Raised when opening, reading or writing fails."""

    pass


class ResourceExhaustedError(SliceError):
    """Raised when buffering an unseekable input runs out of memory."""

    def __init__(self, message: str) -> None:
        super().__init__(message, stage="buffer")
