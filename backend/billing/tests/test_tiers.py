import pytest

from billing.plans import get_plan, get_plans
from billing.tiers import get_required_tier, has_feature_access, has_tier_access, tier_level


@pytest.mark.parametrize("tier,feature,expected", [
    ("basic", "analytics", False),
    ("enterprise", "analytics", True),
    ("pro", "post_jobs", True),
    ("basic", "post_jobs", False),
    ("pro", "analytics", False),
    ("basic", "reviews", True),
])
def test_feature_access(tier, feature, expected):
    assert has_feature_access(tier, feature) is expected


def test_unknown_tier_ranks_as_basic():
    assert tier_level("gold") == tier_level("basic") == 0
    assert tier_level(None) == 0
    assert has_tier_access("ENTERPRISE", "pro")


def test_unknown_feature_is_an_error():
    with pytest.raises(ValueError):
        get_required_tier("teleport")


def test_plans_carry_configured_price_ids():
    assert [p.tier for p in get_plans()] == ["basic", "pro", "enterprise"]
    assert get_plan("basic").price_id is None
    assert get_plan("pro").price_id == "price_pro_test"
    assert get_plan("enterprise").as_dict()["price_aud"] == 99
