"""Greeting engine: period-of-day classification and message selection."""

from __future__ import annotations

from datetime import datetime

from .constants import Language, PeriodOfDay
from .result import Failure, Outcome, Success, ValidationError

TEMPLATES: dict[tuple[Language, PeriodOfDay], str] = {
    (Language.EN, PeriodOfDay.MORNING): "Good morning, {name}!",
    (Language.EN, PeriodOfDay.DAY): "Hello, {name}!",
    (Language.EN, PeriodOfDay.EVENING): "Good evening, {name}!",
    (Language.JA, PeriodOfDay.MORNING): "おはようございます、{name}さん！",
    (Language.JA, PeriodOfDay.DAY): "こんにちは、{name}さん！",
    (Language.JA, PeriodOfDay.EVENING): "こんばんは、{name}さん！",
    (Language.ES, PeriodOfDay.MORNING): "¡Buenos días, {name}!",
    (Language.ES, PeriodOfDay.DAY): "¡Hola, {name}!",
    (Language.ES, PeriodOfDay.EVENING): "¡Buenas noches, {name}!",
}


def classify_hour(hour: int) -> PeriodOfDay:
    if hour < 12:
        return PeriodOfDay.MORNING
    if hour < 18:
        return PeriodOfDay.DAY
    return PeriodOfDay.EVENING


def get_period_of_day(timestamp: datetime) -> PeriodOfDay:
    """Classify TIMESTAMP by its own hour; no timezone conversion happens."""
    return classify_hour(timestamp.hour)


def create_greeting(name: str, language: Language, timestamp: datetime) -> Outcome[str]:
    """Build the greeting for NAME, or a validation failure if NAME is empty.

    Only emptiness is checked, so a blank name such as ``" "`` is accepted.
    """
    if len(name) < 1:
        return Failure(ValidationError("Name cannot be empty"))
    template = TEMPLATES[(language, get_period_of_day(timestamp))]
    return Success(template.format(name=name))
