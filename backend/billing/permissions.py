from rest_framework.permissions import BasePermission

from common.exceptions import FeatureGateError
from .tiers import get_required_tier, has_feature_access


def company_tier(user) -> str:
    company = getattr(user, "company", None) if user and user.is_authenticated else None
    return company.tier if company is not None else "basic"


def require_feature(feature: str):
    """
    Permission class factory: denies with a 402 upgrade prompt when the
    caller's company tier does not include `feature`.
    """
    required = get_required_tier(feature)

    class FeatureGate(BasePermission):
        def has_permission(self, request, view):
            if not (request.user and request.user.is_authenticated):
                return False
            tier = company_tier(request.user)
            if not has_feature_access(tier, feature):
                raise FeatureGateError(feature, required, current_tier=tier)
            return True

    FeatureGate.__name__ = f"Requires_{feature}"
    return FeatureGate
