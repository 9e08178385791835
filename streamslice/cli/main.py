#!/usr/bin/env python3
"""
Main CLI entry point for streamslice.

    streamslice [OPTIONS] RANGE [INPUT]

Writes the RANGE slice of INPUT (or standard input) to standard output.
RANGE is ``start:end`` with Python slice semantics: either side may be
omitted or negative, and the end may be written ``+N`` to take N units
after the start.
"""

import sys
from typing import NoReturn

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.config import SliceSettings
from ..core.errors import (
    InvalidRangeError,
    ResourceExhaustedError,
    SliceError,
)
from ..core.logging import configure_from_settings
from ..core.pipeline import slice_stream
from ..datastructures.range_spec import Unit

console = Console(stderr=True)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_RANGE = 2
EXIT_RESOURCE_EXHAUSTED = 3
EXIT_BAD_SETTINGS = 4


def _exit_code_for(error: SliceError) -> int:
    if isinstance(error, InvalidRangeError):
        return EXIT_INVALID_RANGE
    if isinstance(error, ResourceExhaustedError):
        return EXIT_RESOURCE_EXHAUSTED
    return EXIT_IO_ERROR


def _fail(message: str, code: int) -> NoReturn:
    console.print(f"[red]streamslice:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(code)


@click.command(
    context_settings={
        # Ranges such as "-10:" must reach RANGE instead of being read as options.
        "ignore_unknown_options": True,
        "help_option_names": ["-h", "--help"],
    }
)
@click.argument("range_text", metavar="RANGE")
@click.argument("input_path", metavar="[INPUT]", required=False)
@click.option(
    "--byte",
    "-c",
    "byte_mode",
    is_flag=True,
    help="Count by bytes instead of lines.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.option(
    "--debug-scope",
    "debug_scopes",
    multiple=True,
    help="Show debug logs for a module prefix only (e.g. core.resolver).",
)
@click.version_option(__version__, prog_name="streamslice")
def cli(
    range_text: str,
    input_path: str | None,
    byte_mode: bool,
    verbose: bool,
    debug_scopes: tuple[str, ...],
):
    """
    Print the RANGE slice of INPUT (default: standard input).

    RANGE is start:end. Either side may be omitted or negative (counting
    from the end), and end may be +N to take N units from start:

    \b
      streamslice 0:5 file.txt      first five lines
      streamslice -10: file.txt     last ten lines
      streamslice 50:+10 file.txt   lines 50..59 (0-based)
      streamslice -c -1024: data    last 1024 bytes
    """
    try:
        settings = SliceSettings()
    except ValidationError as e:
        _fail(f"invalid STREAMSLICE_* setting: {e}", EXIT_BAD_SETTINGS)

    if debug_scopes:
        settings = settings.model_copy(
            update={"debug_scopes": settings.debug_scopes + debug_scopes}
        )
    configure_from_settings(settings, verbose=verbose)

    unit = Unit.BYTE if byte_mode else Unit.LINE
    try:
        report = slice_stream(
            range_text,
            click.get_binary_stream("stdout"),
            input_path=input_path,
            unit=unit,
            stdin=click.get_binary_stream("stdin"),
            settings=settings,
        )
    except SliceError as e:
        logger.debug("Slicing failed at stage {}: {}", e.stage, e.message)
        _fail(e.message, _exit_code_for(e))

    logger.info(
        "Wrote {} {}s of range {} via {}",
        report.units_written,
        unit.value,
        report.resolved,
        report.strategy.value,
    )


def main():
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
