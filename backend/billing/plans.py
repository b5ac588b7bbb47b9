from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import List, Optional

from django.conf import settings

from .tiers import Tier


@dataclass(frozen=True)
class Plan:
    tier: str
    name: str
    price_aud: int  # per month
    price_id: Optional[str]
    features: tuple

    def as_dict(self) -> dict:
        data = asdict(self)
        data["features"] = list(self.features)
        return data


def get_plans() -> List[Plan]:
    price_ids = settings.BILLING["PRICE_IDS"]
    return [
        Plan(Tier.BASIC.value, "Basic", 0, None,
             ("Directory listing", "Reviews", "Quote requests", "Profile preview")),
        Plan(Tier.PRO.value, "Pro", 29, price_ids.get("pro"),
             ("Everything in Basic", "Job postings", "Ad booking", "Facebook group posts")),
        Plan(Tier.ENTERPRISE.value, "Enterprise", 99, price_ids.get("enterprise"),
             ("Everything in Pro", "Analytics dashboard")),
    ]


def get_plan(tier: str) -> Plan:
    for plan in get_plans():
        if plan.tier == tier:
            return plan
    raise KeyError(tier)
