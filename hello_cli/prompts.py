"""Terminal prompt provider used by the interactive fallback."""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Protocol, Sequence, Union

from rich.console import Console
from rich.prompt import Prompt

from .console import err_console


class _Cancel:
    def __repr__(self) -> str:
        return "CANCEL"


CANCEL = _Cancel()


def is_cancel(value: Any) -> bool:
    return value is CANCEL


class Prompter(Protocol):
    async def text(self, message: str, placeholder: str = "") -> Union[str, _Cancel]: ...

    async def select(self, message: str, options: Sequence[tuple[Any, str]]) -> Any: ...


@contextmanager
def interruptible() -> Iterator[None]:
    """Let Ctrl-C raise KeyboardInterrupt while a blocking prompt waits.

    ``asyncio.run`` replaces the SIGINT handler with one that only cancels the
    main task, which a blocking ``input()`` never notices.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


class RichPrompter:
    """Ask on stderr with rich; Ctrl-C or end of input cancels."""

    def __init__(self, console: Console = err_console) -> None:
        self.console = console

    async def text(self, message: str, placeholder: str = "") -> Union[str, _Cancel]:
        if placeholder:
            message = f"{message} [dim]({placeholder})[/dim]"
        try:
            with interruptible():
                return Prompt.ask(message, console=self.console)
        except (KeyboardInterrupt, EOFError):
            return CANCEL

    async def select(self, message: str, options: Sequence[tuple[Any, str]]) -> Any:
        by_key = {str(getattr(value, "value", value)): value for value, _ in options}
        for key, (_, label) in zip(by_key, options):
            self.console.print(f"  [cyan]{key}[/cyan]  {label}")
        try:
            with interruptible():
                answer = Prompt.ask(message, console=self.console, choices=list(by_key))
        except (KeyboardInterrupt, EOFError):
            return CANCEL
        return by_key[answer]
