"""Interactive fallback collecting the name and language the command line left out."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from rich.console import Console

from .console import err_console
from .constants import APP_NAME, Language
from .prompts import Prompter, is_cancel
from .result import CancellationSignal

logger = logging.getLogger(__name__)


class FallbackState(str, Enum):
    IDLE = "idle"
    PROMPTING_NAME = "prompting_name"
    PROMPTING_LANGUAGE = "prompting_language"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


def needs_fallback(language: Optional[Language]) -> bool:
    """The fallback runs only while the language is unresolved."""
    return language is None


class InteractiveFallback:
    def __init__(self, prompter: Prompter, console: Console = err_console) -> None:
        self.prompter = prompter
        self.console = console
        self.state = FallbackState.IDLE

    def _move(self, state: FallbackState) -> None:
        logger.debug("Interactive fallback %s -> %s", self.state.value, state.value)
        self.state = state

    def _cancel(self) -> None:
        self._move(FallbackState.CANCELLED)
        self.console.print("[yellow]Cancelled.[/yellow]")
        raise CancellationSignal()

    async def _ask_name(self) -> str:
        while True:
            name = await self.prompter.text("What is your name?", placeholder="Alice")
            if is_cancel(name):
                self._cancel()
            if name:
                return name
            self.console.print("[red]Name is required![/red]")

    async def _ask_language(self) -> Language:
        choice = await self.prompter.select(
            "Choose a language",
            [(lang, lang.label) for lang in Language],
        )
        if is_cancel(choice):
            self._cancel()
        return Language(choice)

    async def resolve(self, name: str) -> tuple[str, Language]:
        """Prompt for whatever is missing, name first, then language.

        Raises CancellationSignal when the user aborts either prompt.
        """
        if self.state is not FallbackState.IDLE:
            raise RuntimeError(f"fallback already used (state: {self.state.value})")
        self.console.print(f"[black on cyan] {APP_NAME} [/black on cyan]")

        if not name:
            self._move(FallbackState.PROMPTING_NAME)
            name = await self._ask_name()
        self._move(FallbackState.PROMPTING_LANGUAGE)
        language = await self._ask_language()
        self._move(FallbackState.RESOLVED)
        return name, language
