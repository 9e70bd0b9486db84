from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

Restaurant = Mapping[str, Any]

# Source files spell the name field both ways
NAME_KEYS = ("name", "Name")


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def restaurant_name(record: Restaurant) -> str | None:
    """Return the record's name if it is text, otherwise ``None``."""
    for key in NAME_KEYS:
        value = record.get(key)
        if value is not None:
            return value if isinstance(value, str) else None
    return None


def coordinates(record: Restaurant) -> tuple[float, float] | None:
    """Return ``(latitude, longitude)`` when both are real numbers."""
    lat = record.get("latitude")
    lng = record.get("longitude")
    if not (_is_real_number(lat) and _is_real_number(lng)):
        return None
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    return float(lat), float(lng)


def cuisine_labels(record: Restaurant) -> list[str] | None:
    """Return the text entries of ``cuisines``, or ``None`` if it is not a list."""
    value = record.get("cuisines")
    if not isinstance(value, (list, tuple)):
        return None
    return [c for c in value if isinstance(c, str)]
