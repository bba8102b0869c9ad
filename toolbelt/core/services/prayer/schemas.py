from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

PRAYER_NAMES = ('Fajr', 'Sunrise', 'Dhuhr', 'Asr', 'Maghrib', 'Isha')


class PrayerTimings(BaseModel):
    """Prayer times for one day, in 12-hour format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date_standard: str
    date_islamic: str
    timezone: str
    source: str
    location: str
    timings: dict[str, str]
    iftar_time: str
    suhoor_time: str
