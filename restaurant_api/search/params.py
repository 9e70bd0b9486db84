from __future__ import annotations

import math
import re

from .errors import BadRequestError

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
# CPython refuses int() on longer digit strings by default
_MAX_DIGITS = 4300


def is_blank(raw: str | None) -> bool:
    """True when a query parameter was not supplied or is empty."""
    return raw is None or not raw.strip()


def parse_positive_int(raw: str | None, default: int) -> int:
    """
    Read a leading integer from ``raw``, falling back to ``default``.

    ``"3"``, ``" 3 "``, ``"3abc"`` and ``"3.9"`` all read as 3. Anything
    without a leading integer, any value below 1, and digit strings too long
    to convert give ``default``.
    """
    if raw is None:
        return default
    match = _INT_PREFIX.match(raw)
    if not match:
        return default
    digits = match.group(1)
    if len(digits.lstrip("+-")) > _MAX_DIGITS:
        return default
    value = int(digits)
    return value if value > 0 else default


def parse_float(raw: str | None) -> float | None:
    """Return ``raw`` as a finite float, or ``None`` if it is not one."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_coordinates(lat: str | None, lng: str | None) -> tuple[float, float]:
    # Presence is checked before parsing so "0" counts as supplied
    if is_blank(lat) or is_blank(lng):
        raise BadRequestError("Latitude and longitude are required")

    user_lat = parse_float(lat)
    user_lng = parse_float(lng)
    if user_lat is None or user_lng is None:
        raise BadRequestError("Invalid latitude or longitude")
    return user_lat, user_lng


def parse_max_distance(raw: str | None, default: float) -> float:
    """
    Radius in km. ``"inf"`` means unbounded; anything that is not a number
    (including ``"nan"``) gives ``default``.
    """
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return default if math.isnan(value) else value
