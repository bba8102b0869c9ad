import math
from collections.abc import Mapping
from typing import Any


def _to_number(value: str) -> int | float | None:
    if '_' in value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def parse_query_params(query: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce numeric query-string values into numbers.

    `'10'` becomes `10`, `'5.5'` becomes `5.5`. Non-numeric strings and
    non-string values are returned unchanged.
    """
    parsed: dict[str, Any] = {}
    for key, value in query.items():
        if isinstance(value, str) and value.strip():
            number = _to_number(value.strip())
            parsed[key] = value if number is None else number
        else:
            parsed[key] = value
    return parsed
