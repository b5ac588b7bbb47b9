from __future__ import annotations

from typing import List, Tuple

from business.models import Company, Review


def verified_companies() -> List[Company]:
    return list(Company.objects.verified().by_tier())


def review_ratings() -> List[Tuple[object, int]]:
    return list(Review.objects.values_list("company_id", "rating"))


def company_ratings(company_id) -> List[Tuple[object, int]]:
    return list(Review.objects.filter(company_id=company_id).values_list("company_id", "rating"))
