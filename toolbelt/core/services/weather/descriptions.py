"""Plain-language weather summaries."""

from collections import Counter
from collections.abc import Sequence
from typing import Any

from toolbelt.core.services.weather.schemas import ForecastDay


def fmt(value: Any) -> str:
    """Render numbers without a trailing `.0`."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_fahrenheit(celsius: float) -> int:
    return round(celsius * 9 / 5 + 32)


def wind_direction(degree: float | None) -> str:
    """Compass name for a wind bearing in degrees."""
    if degree is None:
        return 'North'
    if degree > 337.5:
        return 'North'
    if degree > 292.5:
        return 'North-West'
    if degree > 247.5:
        return 'West'
    if degree > 202.5:
        return 'South-West'
    if degree > 157.5:
        return 'South'
    if degree > 122.5:
        return 'South-East'
    if degree > 67.5:
        return 'East'
    if degree > 22.5:
        return 'North-East'
    return 'North'


def describe_current(current: dict[str, Any]) -> str:
    """One paragraph describing current conditions (metric input)."""
    conditions = (current.get('conditions') or '').lower()
    temp, feelslike, dew = current.get('temp'), current.get('feelslike'), current.get('dew')
    return (
        f'Currently, the weather is {conditions}. '
        f'The temperature is approximately {fmt(temp)}°C ({to_fahrenheit(temp or 0)}°F), '
        f'feels like {fmt(feelslike)}°C ({to_fahrenheit(feelslike or 0)}°F). '
        f'{conditions} skies, with a wind speed of {fmt(current.get("windspeed"))} km/h '
        f'coming from {wind_direction(current.get("winddir"))} ({fmt(current.get("winddir"))}°). '
        f'The precipitation (rain) is {fmt(current.get("precip"))} mm ({fmt(current.get("precipprob"))}% probability), '
        f'with {fmt(current.get("snow"))} mm of snow and a snow depth of {fmt(current.get("snowdepth"))} mm. '
        f'Humidity is {fmt(current.get("humidity"))}%, dew point is {fmt(dew)}°C ({to_fahrenheit(dew or 0)}°F). '
        f'The atmospheric pressure is {fmt(current.get("pressure"))} hPa, '
        f'visibility is {fmt(current.get("visibility"))} km, cloud cover is {fmt(current.get("cloudcover"))}%, '
        f'solar radiation is {fmt(current.get("solarradiation"))} W/m², '
        f'and UV index is {fmt(current.get("uvindex"))}. '
        f'Sunrise at {current.get("sunrise")} and sunset at {current.get("sunset")}.'
    )


def describe_day(day: ForecastDay, with_summary: bool = True) -> str:
    conditions = day.conditions.lower()
    lead = f'On {day.day_of_week} ({day.date}), '
    if with_summary:
        lead += f'the weather will be {conditions}. The temperature will range'
    else:
        lead += 'the temperature will range'
    return (
        f'{lead} from {fmt(day.min_temp_c)}°C ({fmt(day.min_temp_f)}°F) to {fmt(day.max_temp_c)}°C '
        f'({fmt(day.max_temp_f)}°F), with an average of {fmt(day.avg_temp_c)}°C ({fmt(day.avg_temp_f)}°F). '
        f'Expect {conditions}, with a wind speed of {fmt(day.wind_speed)} km/h coming from {fmt(day.wind_dir)}°. '
        f'The precipitation is {fmt(day.precipitation)} mm, humidity is {fmt(day.humidity)}%.'
    )


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def most_frequent_conditions(forecast: Sequence[ForecastDay]) -> str:
    """The most common condition; ties go to the first one seen."""
    counts = Counter(day.conditions for day in forecast)
    return max(counts, key=lambda condition: counts[condition]) if counts else ''


def describe_period(forecast: Sequence[ForecastDay], opening: str) -> str:
    """Averages over a multi-day forecast.

    Args:
        forecast: Days to summarise
        opening: Sentence start, e.g. "This week's weather will be mostly"
    """
    conditions = most_frequent_conditions(forecast).lower()
    total_precipitation = sum(day.precipitation or 0 for day in forecast)
    return (
        f'{opening} {conditions}. '
        f'The average maximum temperature will be {_mean([d.max_temp_c for d in forecast]):.1f}°C '
        f'({_mean([d.max_temp_f for d in forecast]):.1f}°F) and the average minimum temperature will be '
        f'{_mean([d.min_temp_c for d in forecast]):.1f}°C ({_mean([d.min_temp_f for d in forecast]):.1f}°F). '
        f'The average temperature will be {_mean([d.avg_temp_c for d in forecast]):.1f}°C '
        f'({_mean([d.avg_temp_f for d in forecast]):.1f}°F). '
        f'Expect wind speeds averaging {_mean([d.wind_speed or 0 for d in forecast]):.1f} km/h '
        f'and total precipitation of {total_precipitation:.1f} mm. '
        f'The average humidity will be {_mean([d.humidity or 0 for d in forecast]):.1f}%.'
    )
