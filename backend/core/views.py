from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone

from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.plans import get_plans
from billing.tiers import FEATURE_TIER_MAP, Tier
from business.choices import REGIONS, SERVICES, SOCIAL_NETWORKS
from jobs.models import JOB_TYPES
from .checks import PROBES, run_checks

# --- Tiny public endpoints ----------------------------------------------------

def healthz(_request):
    return JsonResponse({"ok": True})


class VersionView(APIView):
    permission_classes = [AllowAny]

    def get(self, _):
        return Response({
            "ok": True,
            "version": str(getattr(settings, "VERSION", None) or "dev"),
            "debug": bool(settings.DEBUG),
            "time": timezone.now().isoformat(),
        })


class WhoAmIView(APIView):
    permission_classes = [AllowAny]  # allow anonymous; returns minimal info

    def get(self, request):
        if not request.user.is_authenticated:
            return Response({"is_authenticated": False})
        user = request.user
        return Response({
            "is_authenticated": True,
            "user_id": str(user.id),
            "email": user.email,
            "full_name": user.full_name,
            "user_type": user.user_type,
            "is_staff": bool(user.is_staff),
        })


class OptionsView(APIView):
    """Fixed vocabularies the forms and filters are built from."""
    permission_classes = [AllowAny]

    def get(self, _):
        return Response({
            "services": list(SERVICES),
            "regions": list(REGIONS),
            "job_types": list(JOB_TYPES),
            "social_networks": list(SOCIAL_NETWORKS),
            "tiers": [t.value for t in Tier],
            "features": dict(FEATURE_TIER_MAP),
            "plans": [p.as_dict() for p in get_plans()],
        })


# --- Deeper diagnostics -------------------------------------------------------

class DeepHealthView(APIView):
    """
    GET /api/v1/core/deep-health/?db=1&cache=1&celery=1
    Return component statuses. All checks optional.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        names = [n for n in PROBES if request.query_params.get(n) == "1"]
        out = run_checks(names)
        return Response({"ok": out["ok"], "time": timezone.now().isoformat(), **out["checks"]})
