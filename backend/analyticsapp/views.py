from __future__ import annotations

from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.permissions import require_feature
from business.models import Company
from business.selectors import company_for, onboarding_steps
from business.serializers import RatingSummarySerializer, ReceivedQuoteSerializer, ReviewSerializer
from common.mixins import DefaultPagination
from common.permissions import IsBusinessUser, IsDirectoryAdmin
from jobs.serializers import JobSerializer
from searchapp.aggregation import aggregate_reviews
from searchapp.selectors import company_ratings
from .models import Lead
from .serializers import LeadSerializer, PeriodSerializer
from .utils import company_summary


class SummaryView(APIView):
    """GET /analytics/summary/?period=7d|30d|90d (Enterprise)"""
    permission_classes = [IsBusinessUser, require_feature("analytics")]

    def get(self, request):
        ser = PeriodSerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        company = company_for(request.user)
        return Response(company_summary(company, ser.validated_data["period"]))


class DashboardView(APIView):
    """
    Landing data after login. Seekers get their counts; business owners get
    the profile snapshot their dashboard page renders.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user
        if getattr(user, "is_business", False):
            return Response(self._business(user))
        return Response({
            "user_type": user.user_type,
            "favourites": user.favourites.count(),
            "recent_views": user.recent_views.count(),
            "saved_searches": user.saved_searches.count(),
            "reviews": user.reviews.count(),
            "quote_requests": user.quote_requests.count(),
        })

    def _business(self, user):
        company = Company.objects.filter(user=user).first()
        if company is None:
            return {"user_type": user.user_type, "company": None, "onboarding": onboarding_steps(None)}
        summary = aggregate_reviews(company_ratings(company.id)).get(company.id)
        pending = company.quote_requests.filter(status="pending").select_related("user")
        return {
            "user_type": user.user_type,
            "company": {"id": str(company.id), "name": company.name, "tier": company.tier, "verified": company.verified},
            "profile_views": company.leads.count(),
            "rating": RatingSummarySerializer(summary).data if summary else None,
            "latest_reviews": ReviewSerializer(company.reviews.select_related("user")[:3], many=True).data,
            "pending_quotes": ReceivedQuoteSerializer(pending[:3], many=True).data,
            "latest_jobs": JobSerializer(company.jobs.all()[:2], many=True).data,
            "onboarding": onboarding_steps(company),
        }


class LeadViewSet(viewsets.ReadOnlyModelViewSet):
    """Raw lead log for the directory administrator."""
    serializer_class = LeadSerializer
    permission_classes = [IsDirectoryAdmin]
    pagination_class = DefaultPagination

    def get_queryset(self):
        qs = Lead.objects.all()
        q = self.request.query_params.get("q")
        return qs.filter(query__icontains=q) if q else qs
