"""
streamslice command line interface.

The ``streamslice`` console script slices a file or standard input by a
``start:end`` range of lines or bytes.
"""

from .main import cli, main

__all__ = ["main", "cli"]
