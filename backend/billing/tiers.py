"""
Subscription tiers and the features they unlock.

Tiers form a total order (basic < pro < enterprise) and every feature maps to
the lowest tier that includes it, so access is monotonic in the tier.
"""
from __future__ import annotations

from django.db import models


class Tier(models.TextChoices):
    BASIC = "basic", "Basic"
    PRO = "pro", "Pro"
    ENTERPRISE = "enterprise", "Enterprise"


TIER_LEVELS = {
    Tier.BASIC.value: 0,
    Tier.PRO.value: 1,
    Tier.ENTERPRISE.value: 2,
}

FEATURE_TIER_MAP = {
    "profile_preview": Tier.BASIC.value,
    "reviews": Tier.BASIC.value,
    "quotes": Tier.BASIC.value,
    "post_jobs": Tier.PRO.value,
    "ad_booking": Tier.PRO.value,
    "fb_post": Tier.PRO.value,
    "analytics": Tier.ENTERPRISE.value,
}


def tier_level(tier: str | None) -> int:
    # unknown or missing tiers rank as basic
    return TIER_LEVELS.get((tier or "").lower(), 0)


def has_tier_access(user_tier: str | None, required_tier: str) -> bool:
    return tier_level(user_tier) >= tier_level(required_tier)


def get_required_tier(feature: str) -> str:
    try:
        return FEATURE_TIER_MAP[feature]
    except KeyError:
        raise ValueError(f"Unknown feature: {feature}") from None


def has_feature_access(user_tier: str | None, feature: str) -> bool:
    return has_tier_access(user_tier, get_required_tier(feature))
