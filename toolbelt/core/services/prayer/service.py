"""Aladhan prayer times by city."""

import asyncio
from datetime import date, timedelta

import httpx

from toolbelt.core.deps import logger
from toolbelt.core.services.prayer.schemas import PRAYER_NAMES, PrayerTimings
from toolbelt.core.utils import to_12_hour


class AladhanService:
    BASE_URL = 'https://api.aladhan.com/v1'

    async def timings_for_day(self, day: date, city: str, country: str, state: str = '') -> PrayerTimings:
        """Timings for one date.

        Args:
            day: Gregorian date
            city: City name (uppercased by the caller)
            country: ISO 3166 alpha-2 code
            state: Optional state or region
        """
        logger.info('Fetching prayer timings', city=city, country=country, date=day.isoformat())
        async with httpx.AsyncClient(base_url=self.BASE_URL, timeout=30.0) as client:
            response = await client.get(
                f'/timingsByCity/{day.strftime("%d-%m-%Y")}',
                params={'city': city, 'country': country, 'state': state},
            )
            response.raise_for_status()
            data = response.json()['data']

        g_day, g_month, g_year = data['date']['gregorian']['date'].split('-')
        timings = {name: to_12_hour(data['timings'][name]) for name in PRAYER_NAMES}
        location = f'{city}{", " + state if state else ""}, {country}'
        return PrayerTimings(
            date_standard=f'{g_month}-{g_day}-{g_year}',
            date_islamic=data['date']['hijri']['date'],
            timezone=data['meta']['timezone'],
            source=data['meta']['method']['name'],
            location=location,
            timings=timings,
            iftar_time=f'The time to break your fast (Iftar) is at {timings["Maghrib"]}.',
            suhoor_time=f'The time for the last meal (Suhoor) is at {timings["Fajr"]}.',
        )

    async def timings_for_week(self, start: date, city: str, country: str, state: str = '') -> list[PrayerTimings]:
        """Seven consecutive days starting at `start`."""
        days = [start + timedelta(days=offset) for offset in range(7)]
        return list(await asyncio.gather(*(self.timings_for_day(day, city, country, state) for day in days)))


class _AladhanServiceHolder:
    instance: AladhanService | None = None


def get_prayer_times() -> AladhanService:
    if _AladhanServiceHolder.instance is None:
        _AladhanServiceHolder.instance = AladhanService()
    return _AladhanServiceHolder.instance
