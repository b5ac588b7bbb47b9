from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Tuple

EARTH_RADIUS_M = 6378137

LatLng = Tuple[float, float]


def haversine_m(a: LatLng, b: LatLng) -> int:
    """Great-circle distance in whole metres."""
    lat1, lng1 = map(math.radians, a)
    lat2, lng2 = map(math.radians, b)
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return round(EARTH_RADIUS_M * c)


def distance_km(origin: Optional[LatLng], location) -> Optional[int]:
    """
    Whole kilometres from the user to a company `Location`, rounded half-up.
    None when the user location is unknown or the company has no coordinates.
    """
    if origin is None or location is None or not location.has_coordinates:
        return None
    metres = haversine_m(origin, (location.lat, location.long))
    return int((Decimal(metres) / 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
