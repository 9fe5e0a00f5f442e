"""Completion handler: the one side effect run after a greeting is computed."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from rich.console import Console

from .console import err_console
from .result import Failure, LogError, Outcome, Success

logger = logging.getLogger(__name__)

LogAction = Callable[[str], Awaitable[Outcome[None]]]


def make_log_to_system(command: str) -> LogAction:
    """Return a logging action that hands each message to COMMAND."""

    async def log_to_system(message: str) -> Outcome[None]:
        try:
            proc = await asyncio.create_subprocess_exec(
                command,
                f"[LOG]: {message}",
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            out, err = await proc.communicate()
        except Exception as exc:  # noqa: BLE001
            return Failure(LogError(f"Failed to log: {exc}"))
        logger.debug("%s exited with %s: %r", command, proc.returncode, out)
        if proc.returncode != 0:
            detail = err.decode("utf-8", errors="ignore").strip()
            return Failure(LogError(f"Failed to log: {command} exited with {proc.returncode} {detail}".rstrip()))
        return Success(None)

    return log_to_system


async def complete(message: str, log_action: LogAction, delay: float = 0.0, console: Console = err_console) -> None:
    """Run LOG_ACTION once for MESSAGE and report how it went.

    A failed logging action is reported as a warning and never raised.
    """
    with console.status("Processing greeting..."):
        if delay:
            await asyncio.sleep(delay)
        outcome = await log_action(message)

    if isinstance(outcome, Success):
        console.print("[green]✔[/green] [bright_black]System log updated.[/bright_black]")
        return
    logger.info("Logging action failed: %s", outcome.error)
    console.print("[yellow]⚠ Failed to update system log, but continuing.[/yellow]")
