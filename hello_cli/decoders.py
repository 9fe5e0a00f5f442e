"""Decoders turning raw command-line tokens into typed values."""

from __future__ import annotations

from typing import Awaitable, Callable, Optional, TypeVar

from .constants import Language
from .result import DecodeError, Failure, Outcome, Success

T = TypeVar("T")

Decoder = Callable[[str], Awaitable[Outcome[T]]]


async def string(raw: str) -> Outcome[str]:
    return Success(raw)


async def language(raw: str) -> Outcome[Language]:
    """Accept exactly one of the language codes, case-sensitive."""
    allowed = [lang.value for lang in Language]
    if raw not in allowed:
        return Failure(DecodeError(f"Invalid language: {raw}. Allowed: {', '.join(allowed)}"))
    return Success(Language(raw))


def optional(decoder: Decoder[T]) -> Callable[[Optional[str]], Awaitable[Outcome[Optional[T]]]]:
    """Lift DECODER so that an absent token decodes to None without calling it."""

    async def decode(raw: Optional[str]) -> Outcome[Optional[T]]:
        if raw is None:
            return Success(None)
        return await decoder(raw)

    decode.is_optional = True  # type: ignore[attr-defined]
    decode.__name__ = f"optional_{getattr(decoder, '__name__', 'decoder')}"
    return decode


def is_optional(decoder: Callable) -> bool:
    return getattr(decoder, "is_optional", False)
