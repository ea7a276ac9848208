"""Logging configuration.

Diagnostics go to stderr through Rich so that stdout only ever carries the
rendered document.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def setup_logging(level: int = logging.WARNING, *, no_color: bool = False) -> None:
    """Configure the root logger with a single Rich handler on stderr."""

    handler = RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)

    # httpx logs every request at INFO; keep it for --verbose only.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
