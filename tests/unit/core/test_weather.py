"""Weather forecast generation tests."""

import datetime
import random

from src.product_api.core.services.weather import (
    SUMMARIES,
    WeatherForecast,
    generate_forecast,
)


def test_returns_five_forecasts_by_default():
    assert len(generate_forecast()) == 5


def test_values_within_bounds():
    for _ in range(50):
        for forecast in generate_forecast():
            assert -20 <= forecast.temperature_c <= 54
            assert forecast.summary in SUMMARIES


def test_dates_follow_today():
    today = datetime.date(2024, 2, 27)

    forecasts = generate_forecast(today=today)

    assert [f.date for f in forecasts] == [
        datetime.date(2024, 2, 28),
        datetime.date(2024, 2, 29),
        datetime.date(2024, 3, 1),
        datetime.date(2024, 3, 2),
        datetime.date(2024, 3, 3),
    ]


def test_seeded_rng_is_reproducible():
    first = generate_forecast(rng=random.Random(7), today=datetime.date(2024, 1, 1))
    second = generate_forecast(rng=random.Random(7), today=datetime.date(2024, 1, 1))

    assert first == second


def test_fahrenheit_conversion():
    today = datetime.date.today()

    def fahrenheit(celsius: int) -> int:
        return WeatherForecast(date=today, temperature_c=celsius).temperature_f

    assert fahrenheit(0) == 32
    assert fahrenheit(100) == 211
    assert fahrenheit(-20) == -3


def test_serializes_with_camel_case_keys():
    forecast = WeatherForecast(
        date=datetime.date(2024, 5, 1), temperature_c=25, summary="Warm"
    )

    assert forecast.model_dump(mode="json", by_alias=True) == {
        "date": "2024-05-01",
        "temperatureC": 25,
        "summary": "Warm",
        "temperatureF": 76,
    }
