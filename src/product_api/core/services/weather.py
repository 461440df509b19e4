"""Synthetic weather forecasts."""

import datetime
import random

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

MIN_TEMPERATURE_C = -20
MAX_TEMPERATURE_C = 54


class WeatherForecast(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: datetime.date
    temperature_c: int
    summary: str | None = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)


def generate_forecast(
    days: int = 5,
    rng: random.Random | None = None,
    today: datetime.date | None = None,
) -> list[WeatherForecast]:
    """Random forecasts for the ``days`` days following ``today``."""
    rng = rng or random.Random()
    today = today or datetime.date.today()
    return [
        WeatherForecast(
            date=today + datetime.timedelta(days=index),
            temperature_c=rng.randint(MIN_TEMPERATURE_C, MAX_TEMPERATURE_C),
            summary=rng.choice(SUMMARIES),
        )
        for index in range(1, days + 1)
    ]
