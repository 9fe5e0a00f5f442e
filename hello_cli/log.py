"""Logging setup: stdlib logging rendered by rich on stderr."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from .console import err_console


def setup_logging(level: str = "WARNING") -> None:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
