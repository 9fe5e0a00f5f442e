"""Enumerations and names shared across hello-cli."""

from __future__ import annotations

from enum import Enum, IntEnum

APP_NAME = "hello-cli"


class Language(str, Enum):
    EN = "en"
    JA = "ja"
    ES = "es"

    @property
    def label(self) -> str:
        return LANGUAGE_LABELS[self]


LANGUAGE_LABELS = {
    Language.EN: "English",
    Language.JA: "日本語",
    Language.ES: "Español",
}


class PeriodOfDay(str, Enum):
    MORNING = "morning"
    DAY = "day"
    EVENING = "evening"


class ExitCode(IntEnum):
    OK = 0
    INTERNAL_ERROR = 1
    USER_ERROR = 2
