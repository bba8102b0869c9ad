import re
from datetime import datetime


def sanitize_filename(url: str) -> str:
    """Turn a URL into a lowercase, hyphen-separated file stem."""
    name = re.sub(r'^https?://', '', url)
    name = re.sub(r'[^a-z0-9]', '-', name, flags=re.IGNORECASE)
    name = re.sub(r'-+', '-', name)
    return name.strip('-').lower()


def capitalize(value: str) -> str:
    value = value.lower()
    return value[:1].upper() + value[1:]


def to_12_hour(value: str, with_seconds: bool = False) -> str:
    """Format an `HH:MM[:SS]` clock string as `h:mm AM`."""
    clock = value.strip().split(' ')[0]
    fmt = '%H:%M:%S' if clock.count(':') == 2 else '%H:%M'
    parsed = datetime.strptime(clock, fmt)
    formatted = parsed.strftime('%I:%M:%S %p' if with_seconds else '%I:%M %p')
    return formatted.lstrip('0')
