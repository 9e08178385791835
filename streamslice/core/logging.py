"""Central logging configuration helpers for streamslice."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping

from loguru import logger

from .config import SliceSettings

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)


def _scope_filter(scopes: tuple[str, ...]) -> Callable[[object], bool]:
    qualified = tuple(
        f"streamslice.{scope}"
        for scope in scopes
        if not scope.startswith("streamslice")
    )
    prefixes = scopes + qualified

    def _filter(record: object) -> bool:
        if not isinstance(record, Mapping):
            return False
        if getattr(record.get("level"), "name", None) != "DEBUG":
            return False
        return str(record.get("name", "")).startswith(prefixes)

    return _filter


def configure_logging(
    level: str,
    *,
    debug_scopes: Iterable[str] = (),
    colorize: bool = False,
) -> tuple[int, ...]:
    """Route loguru records to stderr; stdout is reserved for sliced data.

    ``debug_scopes`` lets DEBUG records of selected modules through even when
    ``level`` is higher, e.g. ``("core.resolver",)``.
    """
    logger.remove()
    level = level.upper()

    handler_ids: list[int] = [
        logger.add(
            sys.stderr, level=level, format=DEFAULT_LOG_FORMAT, colorize=colorize
        )
    ]

    scopes = tuple(scope.strip() for scope in debug_scopes if scope.strip())
    if scopes and level != "DEBUG":
        handler_ids.append(
            logger.add(
                sys.stderr,
                level="DEBUG",
                format=DEFAULT_LOG_FORMAT,
                colorize=colorize,
                filter=_scope_filter(scopes),
            )
        )

    return tuple(handler_ids)


def configure_from_settings(
    settings: SliceSettings, *, verbose: bool = False
) -> tuple[int, ...]:
    return configure_logging(
        "DEBUG" if verbose else settings.log_level,
        debug_scopes=settings.debug_scopes,
        colorize=settings.colorize_logs,
    )
