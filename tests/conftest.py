"""Pytest configuration and fixtures for streamslice testing.

Fixtures here provide input files on disk (seekable sources) and in-memory
stdin replacements (forward-only sources), and keep loguru from leaking
handlers between tests.
"""

import io
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from loguru import logger

from streamslice.core.config import SliceSettings
from tests.test_helpers import numbered_lines


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    """The CLI reconfigures loguru onto a captured stderr; undo that after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """Factory writing bytes to a fresh file and returning its path."""
    counter = 0

    def _write(data: bytes, name: str | None = None) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / (name or f"input-{counter}.txt")
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def hundred_lines() -> bytes:
    return numbered_lines(100)


@pytest.fixture
def hundred_lines_file(
    write_input: Callable[[bytes], Path], hundred_lines: bytes
) -> Path:
    return write_input(hundred_lines)


@pytest.fixture
def stdin_of() -> Callable[[bytes], io.BytesIO]:
    return io.BytesIO


@pytest.fixture
def small_chunks() -> SliceSettings:
    """Settings with a tiny chunk size so chunk boundaries fall mid-line."""
    return SliceSettings(chunk_size=7)
