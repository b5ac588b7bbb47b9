"""
Directory filter pipeline.

Each active filter is an independent predicate over one company; the pipeline
keeps a company only when every active predicate holds. A filter at its neutral
value (empty string, zero, empty list, False) is inactive. Filtering never
reorders its input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .geo import LatLng, distance_km

SORT_MODES = ("relevance", "rating", "reviews", "years", "distance")

# has-X flag -> company attribute that must be non-empty
PRESENCE_FLAGS = {
    "has_insurance": "insurance_details",
    "has_certifications": "certifications",
    "has_website": "website",
    "has_operating_hours": "operating_hours",
    "has_references": "references",
    "has_licenses": "licenses",
}


@dataclass
class FilterState:
    service: str = ""
    region: str = ""
    sort_by: str = "relevance"
    min_rating: float = 0
    min_years: int = 0
    min_employees: int = 0
    tiers: List[str] = field(default_factory=list)
    payment_methods: List[str] = field(default_factory=list)
    has_insurance: bool = False
    has_certifications: bool = False
    has_website: bool = False
    has_operating_hours: bool = False
    has_references: bool = False
    has_licenses: bool = False
    max_distance: int = 0

    # directory query string for this state; neutral values are left out
    def as_query(self) -> Dict[str, str]:
        q: Dict[str, str] = {}
        if self.service:
            q["service"] = self.service
        if self.region:
            q["region"] = self.region
        if self.sort_by and self.sort_by != "relevance":
            q["sort"] = self.sort_by
        for name in ("min_rating", "min_years", "min_employees", "max_distance"):
            value = getattr(self, name)
            if value:
                q[name] = str(value)
        if self.tiers:
            q["tiers"] = ",".join(self.tiers)
        if self.payment_methods:
            q["payment_methods"] = ",".join(self.payment_methods)
        for flag in PRESENCE_FLAGS:
            if getattr(self, flag):
                q[flag] = "true"
        return q

    def predicates_for(self, ratings: Dict, origin: Optional[LatLng]) -> List[Callable]:
        preds: List[Callable] = []
        if self.service:
            preds.append(lambda c: self.service in (c.services or []))
        if self.region:
            preds.append(lambda c: c.location.region == self.region)
        if self.min_rating > 0:
            def rating_ok(c):
                summary = ratings.get(c.id)
                return summary is not None and summary.average >= self.min_rating
            preds.append(rating_ok)
        if self.min_years > 0:
            preds.append(lambda c: (c.years_in_business or 0) >= self.min_years)
        if self.min_employees > 0:
            preds.append(lambda c: (c.number_of_employees or 0) >= self.min_employees)
        if self.tiers:
            wanted = {t.lower() for t in self.tiers}
            preds.append(lambda c: (c.subscription_tier or "basic").lower() in wanted)
        if self.payment_methods:
            preds.append(lambda c: any(m in (c.payment_methods or []) for m in self.payment_methods))
        for flag, attr in PRESENCE_FLAGS.items():
            if getattr(self, flag):
                preds.append(lambda c, attr=attr: bool(getattr(c, attr, None)))
        if self.max_distance > 0 and origin is not None:
            def near_enough(c):
                km = distance_km(origin, c.location)
                return km is not None and km <= self.max_distance
            preds.append(near_enough)
        return preds


def apply_filters(companies: Sequence, state: FilterState, ratings: Dict, origin: Optional[LatLng] = None) -> list:
    preds = state.predicates_for(ratings, origin)
    return [c for c in companies if all(p(c) for p in preds)]
