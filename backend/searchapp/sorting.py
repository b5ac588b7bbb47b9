from __future__ import annotations

import math
from typing import Dict, Optional, Sequence

from .geo import LatLng, distance_km


def sort_companies(companies: Sequence, mode: str, ratings: Dict, origin: Optional[LatLng] = None) -> list:
    """
    Stable re-sort of an already filtered list. `relevance` keeps the store
    order (tier descending); `distance` without a user location does too.
    Missing ratings, counts and years count as zero; unknown distances go last.
    """
    items = list(companies)
    if mode == "rating":
        items.sort(key=lambda c: _summary(ratings, c, "average"), reverse=True)
    elif mode == "reviews":
        items.sort(key=lambda c: _summary(ratings, c, "count"), reverse=True)
    elif mode == "years":
        items.sort(key=lambda c: c.years_in_business or 0, reverse=True)
    elif mode == "distance":
        if origin is not None:
            items.sort(key=lambda c: _km_or_inf(origin, c))
    elif mode != "relevance":
        raise ValueError(f"Unknown sort mode: {mode}")
    return items


def _summary(ratings, company, attr):
    summary = ratings.get(company.id)
    return getattr(summary, attr) if summary is not None else 0


def _km_or_inf(origin, company):
    km = distance_km(origin, company.location)
    return math.inf if km is None else km
