import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from common.permissions import IsBusinessUser
from business.selectors import company_for, onboarding_steps
from .checkout import create_checkout_session
from .plans import get_plan, get_plans
from .serializers import SelectPlanSerializer
from .tiers import Tier, has_feature_access, FEATURE_TIER_MAP

logger = logging.getLogger(__name__)


class SubscriptionViewSet(viewsets.GenericViewSet):
    """
    GET  /api/v1/billing/subscription/         current tier, plans, onboarding
    POST /api/v1/billing/subscription/select/  {"plan": "basic"|"pro"|"enterprise"}
    """
    permission_classes = [IsBusinessUser]
    serializer_class = SelectPlanSerializer

    def list(self, request):
        company = company_for(request.user)
        return Response({
            "tier": company.tier,
            "subscription_id": company.subscription_id,
            "plans": [p.as_dict() for p in get_plans()],
            "features": {f: has_feature_access(company.tier, f) for f in FEATURE_TIER_MAP},
            "onboarding": onboarding_steps(company),
        })

    @action(detail=False, methods=["post"])
    def select(self, request):
        ser = self.get_serializer(data=request.data)
        ser.is_valid(raise_exception=True)
        company = company_for(request.user)
        plan = get_plan(ser.validated_data["plan"])

        if plan.tier == Tier.BASIC:
            # free plan: direct update, nothing to pay
            company.subscription_tier = Tier.BASIC
            company.subscription_id = None
            company.save(update_fields=["subscription_tier", "subscription_id", "updated_at"])
            logger.info("company %s moved to basic", company.id)
            return Response({"tier": company.tier})

        url = create_checkout_session(plan.price_id, request.user.id)
        return Response({"checkout_url": url})
