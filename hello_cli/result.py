"""Outcome values and the error taxonomy.

User-facing failures travel as ``Failure`` values through return channels.
Only ``CancellationSignal`` is raised, since it ends the invocation outright.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorValue:
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class UserError(ErrorValue):
    """A failure caused by what the user typed; exits with status 2."""


@dataclass(frozen=True)
class DecodeError(UserError):
    """A raw token could not be turned into a value."""


@dataclass(frozen=True)
class BindingError(UserError):
    """The command line does not fit the declared arguments."""


@dataclass(frozen=True)
class ValidationError(UserError):
    """A domain rule was violated."""


@dataclass(frozen=True)
class LogError(ErrorValue):
    """The logging action could not record a message."""


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    error: ErrorValue


Outcome = Union[Success[T], Failure]


class CancellationSignal(Exception):
    """The user aborted an interactive prompt."""
