from datetime import datetime, timedelta, timezone
from itertools import product

import pytest

from hello_cli.constants import Language, PeriodOfDay
from hello_cli.greeting import TEMPLATES, create_greeting, get_period_of_day
from hello_cli.result import Failure, Success, ValidationError


@pytest.mark.parametrize("hour", range(24))
def test_period_of_day_thresholds(hour):
    expected = PeriodOfDay.MORNING if hour < 12 else PeriodOfDay.DAY if hour < 18 else PeriodOfDay.EVENING
    assert get_period_of_day(datetime(2024, 1, 1, hour, 59)) is expected


def test_period_uses_timestamp_hour_without_conversion():
    tokyo = timezone(timedelta(hours=9))
    assert get_period_of_day(datetime(2024, 1, 1, 20, 0, tzinfo=tokyo)) is PeriodOfDay.EVENING


def test_templates_cover_every_language_and_period():
    assert set(TEMPLATES) == set(product(Language, PeriodOfDay))


@pytest.mark.parametrize("language,period", list(product(Language, PeriodOfDay)))
def test_every_pair_greets_by_name(language, period):
    hour = {PeriodOfDay.MORNING: 8, PeriodOfDay.DAY: 13, PeriodOfDay.EVENING: 21}[period]
    result = create_greeting("Alice", language, datetime(2024, 1, 1, hour))
    assert isinstance(result, Success)
    assert "Alice" in result.value


@pytest.mark.parametrize(
    "language,hour,message",
    [
        (Language.EN, 11, "Good morning, Bob!"),
        (Language.EN, 12, "Hello, Bob!"),
        (Language.JA, 18, "こんばんは、Bobさん！"),
        (Language.ES, 0, "¡Buenos días, Bob!"),
    ],
)
def test_messages(language, hour, message):
    assert create_greeting("Bob", language, datetime(2024, 1, 1, hour)) == Success(message)


@pytest.mark.parametrize("hour", [0, 12, 23])
def test_empty_name_fails(hour):
    result = create_greeting("", Language.EN, datetime(2024, 1, 1, hour))
    assert isinstance(result, Failure)
    assert isinstance(result.error, ValidationError)
    assert str(result.error) == "Name cannot be empty"


def test_blank_name_is_accepted():
    assert create_greeting(" ", Language.EN, datetime(2024, 1, 1, 13)) == Success("Hello,  !")
