from toolbelt.core.services.prayer.schemas import PRAYER_NAMES, PrayerTimings
from toolbelt.core.services.prayer.service import AladhanService, get_prayer_times

__all__ = ['PRAYER_NAMES', 'AladhanService', 'PrayerTimings', 'get_prayer_times']
