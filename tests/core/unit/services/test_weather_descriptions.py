"""Tests for the plain-language weather summaries."""

import pytest

from toolbelt.core.services.weather.descriptions import (
    describe_day,
    describe_period,
    fmt,
    most_frequent_conditions,
    wind_direction,
)
from toolbelt.core.services.weather.schemas import ForecastDay


def make_day(conditions: str = 'Clear', max_c: float = 20.0, min_c: float = 10.0, precipitation: float = 0.0):
    avg_c = (max_c + min_c) / 2
    return ForecastDay(
        date='2024-06-10',
        day_of_week='Monday',
        max_temp_c=max_c,
        min_temp_c=min_c,
        avg_temp_c=avg_c,
        max_temp_f=max_c * 9 / 5 + 32,
        min_temp_f=min_c * 9 / 5 + 32,
        avg_temp_f=avg_c * 9 / 5 + 32,
        wind_speed=12.0,
        wind_dir=180.0,
        precipitation=precipitation,
        humidity=60.0,
        conditions=conditions,
    )


@pytest.mark.parametrize(
    ('degree', 'expected'),
    [
        (None, 'North'),
        (0, 'North'),
        (45, 'North-East'),
        (90, 'East'),
        (135, 'South-East'),
        (180, 'South'),
        (225, 'South-West'),
        (270, 'West'),
        (315, 'North-West'),
        (350, 'North'),
    ],
)
def test_wind_direction(degree, expected):
    assert wind_direction(degree) == expected


def test_fmt_drops_trailing_zero():
    assert fmt(20.0) == '20'
    assert fmt(20.5) == '20.5'
    assert fmt(None) == 'None'


def test_describe_day():
    text = describe_day(make_day(conditions='Partially cloudy'))

    assert text.startswith('On Monday (2024-06-10), the weather will be partially cloudy.')
    assert 'from 10°C (50°F) to 20°C (68°F)' in text
    assert 'wind speed of 12 km/h coming from 180°' in text


def test_describe_day_without_summary():
    text = describe_day(make_day(), with_summary=False)

    assert text.startswith('On Monday (2024-06-10), the temperature will range from')


def test_most_frequent_conditions_prefers_first_on_tie():
    days = [make_day('Rain'), make_day('Clear'), make_day('Clear'), make_day('Rain')]

    assert most_frequent_conditions(days) == 'Rain'
    assert most_frequent_conditions([]) == ''


def test_describe_period_averages():
    days = [make_day('Rain', 20, 10, 2.5), make_day('Rain', 30, 20, 1.0), make_day('Clear', 25, 15, 0)]

    text = describe_period(days, "This week's weather will be mostly")

    assert text.startswith("This week's weather will be mostly rain.")
    assert 'average maximum temperature will be 25.0°C (77.0°F)' in text
    assert 'total precipitation of 3.5 mm' in text
