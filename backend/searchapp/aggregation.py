from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class RatingSummary:
    average: float
    count: int


def round_rating(total: int, count: int) -> float:
    return float((Decimal(total) / Decimal(count)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def aggregate_reviews(pairs: Iterable[Tuple[object, int]]) -> Dict[object, RatingSummary]:
    """
    One pass over (company_id, rating) pairs. Companies without reviews are
    absent from the result; consumers treat absence as zero.
    """
    totals: Dict[object, list] = {}
    for company_id, rating in pairs:
        acc = totals.setdefault(company_id, [0, 0])
        acc[0] += rating
        acc[1] += 1
    return {cid: RatingSummary(average=round_rating(s, n), count=n) for cid, (s, n) in totals.items()}
