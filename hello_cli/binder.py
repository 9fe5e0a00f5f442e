"""Bind raw command-line tokens to declared arguments and decode them."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from .decoders import is_optional
from .result import BindingError, DecodeError, Failure, Outcome, Success

logger = logging.getLogger(__name__)


class ArgumentKind(str, Enum):
    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class ArgumentSpec:
    key: str
    kind: ArgumentKind
    decoder: Callable
    required: bool = True
    long: Optional[str] = None
    short: Optional[str] = None
    display_name: Optional[str] = None
    help: str = ""

    @property
    def label(self) -> str:
        if self.kind is ArgumentKind.NAMED:
            return f"--{self.long}" if self.long else f"-{self.short}"
        return f"<{self.display_name or self.key}>"


BoundArguments = dict[str, Any]


def _partition(specs: Sequence[ArgumentSpec], tokens: Sequence[str]) -> Outcome[dict[str, str]]:
    """Split TOKENS into raw values keyed by argument key."""
    by_flag: dict[str, ArgumentSpec] = {}
    for spec in specs:
        if spec.kind is ArgumentKind.NAMED:
            if spec.long:
                by_flag[f"--{spec.long}"] = spec
            if spec.short:
                by_flag[f"-{spec.short}"] = spec
    positional_specs = [s for s in specs if s.kind is ArgumentKind.POSITIONAL]

    raw: dict[str, str] = {}
    positionals: list[str] = []
    it = iter(tokens)
    options_done = False
    for token in it:
        if options_done or token == "-" or not token.startswith("-"):
            positionals.append(token)
            continue
        if token == "--":
            options_done = True
            continue

        flag, value = token, None
        if token.startswith("--") and "=" in token:
            flag, value = token.split("=", 1)
        elif not token.startswith("--") and len(token) > 2:
            flag, value = token[:2], token[2:]

        spec = by_flag.get(flag)
        if spec is None:
            return Failure(BindingError(f"Unknown option: {flag}"))
        if value is None:
            value = next(it, None)
            if value is None:
                return Failure(BindingError(f"{spec.label}: option requires a value"))
        raw[spec.key] = value

    if len(positionals) > len(positional_specs):
        extra = positionals[len(positional_specs)]
        return Failure(BindingError(f"Unexpected argument: {extra}"))
    for spec, value in zip(positional_specs, positionals):
        raw[spec.key] = value
    return Success(raw)


async def _decode(spec: ArgumentSpec, raw: Optional[str]) -> Outcome[Any]:
    if raw is None:
        if spec.required:
            return Failure(BindingError(f"Missing required argument: {spec.display_name or spec.key}"))
        if not is_optional(spec.decoder):
            return Success(None)
    outcome = await spec.decoder(raw)
    if isinstance(outcome, Failure):
        return Failure(DecodeError(f"{spec.label}: {outcome.error}"))
    return outcome


async def bind(specs: Sequence[ArgumentSpec], tokens: Sequence[str]) -> Outcome[BoundArguments]:
    """Decode TOKENS against SPECS.

    Every decoder runs concurrently; the first failure in declaration order
    wins. Exceptions raised by a decoder are not failures and propagate.
    """
    partitioned = _partition(specs, tokens)
    if isinstance(partitioned, Failure):
        return partitioned
    raw = partitioned.value
    logger.debug("Binding raw values %s", raw)

    outcomes = await asyncio.gather(*(_decode(spec, raw.get(spec.key)) for spec in specs))
    bound: BoundArguments = {}
    for spec, outcome in zip(specs, outcomes):
        if isinstance(outcome, Failure):
            return outcome
        bound[spec.key] = outcome.value
    return Success(bound)
