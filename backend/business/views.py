import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from analyticsapp.utils import log_lead
from billing.permissions import require_feature
from common.mixins import DefaultPagination, LoggedActionsMixin, OwnerScopedModelViewSet
from common.permissions import IsBusinessUser, IsDirectoryAdmin, IsSeekerUser
from searchapp.aggregation import aggregate_reviews
from searchapp.selectors import company_ratings
from seekers.services import record_recent_view
from .models import Company, QuoteRequest, Review
from .selectors import company_for
from .serializers import (
    CompanyProfileSerializer, CompanyPublicSerializer, LicenseUploadSerializer,
    PendingCompanySerializer, QuoteRequestSerializer, RatingSummarySerializer,
    ReceivedQuoteSerializer, ReviewSerializer,
)
from .services import approve_company, reject_company, upload_licenses

logger = logging.getLogger(__name__)


def _rating_for(company):
    summary = aggregate_reviews(company_ratings(company.id)).get(company.id)
    return RatingSummarySerializer(summary).data if summary else None


# -------- Companies --------
class CompanyViewSet(mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """
    GET   /company/<id>/            public profile of a listed company
    GET   /company/me/              owner profile
    PATCH /company/me/              owner save (back to the approval queue)
    POST  /company/me/licenses/     multipart license upload
    GET   /company/me/preview/      how the listing will look
    """
    queryset = Company.objects.verified()
    serializer_class = CompanyPublicSerializer
    permission_classes = [AllowAny]

    def retrieve(self, request, *args, **kwargs):
        company = self.get_object()
        user = request.user
        if user.is_authenticated and getattr(user, "is_seeker", False):
            record_recent_view(user, company)
            log_lead(f"Profile view: {company.name}", company=company)
        data = self.get_serializer(company).data
        data["rating"] = _rating_for(company)
        data["reviews"] = ReviewSerializer(company.reviews.select_related("user")[:5], many=True).data
        return Response(data)

    @action(detail=False, methods=["get", "patch"], permission_classes=[IsBusinessUser])
    def me(self, request):
        company = company_for(request.user)
        if request.method == "GET":
            return Response(CompanyProfileSerializer(company).data)
        ser = CompanyProfileSerializer(company, data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        ser.save()
        logger.info("company %s profile saved by user=%s; pending approval", company.id, request.user.id)
        return Response(ser.data)

    @action(
        detail=False, methods=["post"], url_path="me/licenses",
        permission_classes=[IsBusinessUser], parser_classes=[MultiPartParser, FormParser],
    )
    def licenses(self, request):
        company = company_for(request.user)
        ser = LicenseUploadSerializer(data={"files": request.FILES.getlist("files")})
        ser.is_valid(raise_exception=True)
        paths = upload_licenses(company, ser.validated_data["files"])
        return Response({"paths": paths, "licenses": company.licenses}, status=status.HTTP_201_CREATED)

    @action(
        detail=False, methods=["get"], url_path="me/preview",
        permission_classes=[IsBusinessUser, require_feature("profile_preview")],
    )
    def preview(self, request):
        company = company_for(request.user)
        data = CompanyPublicSerializer(company).data
        data["rating"] = _rating_for(company)
        return Response(data)


# -------- Reviews (seeker side) --------
class ReviewViewSet(LoggedActionsMixin, OwnerScopedModelViewSet):
    queryset = Review.objects.select_related("company", "user")
    serializer_class = ReviewSerializer
    http_method_names = ["get", "post", "delete", "head", "options"]
    search_fields = ("comment", "company__name")
    ordering_fields = ("created_at", "rating")

    def get_permissions(self):
        if self.action == "create":
            return [IsSeekerUser()]
        return [IsAuthenticated()]


# -------- Quote requests (seeker side) --------
class QuoteRequestViewSet(LoggedActionsMixin, OwnerScopedModelViewSet):
    queryset = QuoteRequest.objects.select_related("company")
    serializer_class = QuoteRequestSerializer
    http_method_names = ["get", "post", "head", "options"]
    search_fields = ("message", "company__name")

    def get_permissions(self):
        if self.action == "create":
            return [IsSeekerUser()]
        return [IsAuthenticated()]


# -------- Business inbox --------
class ReceivedReviewViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ReviewSerializer
    permission_classes = [IsBusinessUser, require_feature("reviews")]
    pagination_class = DefaultPagination

    def get_queryset(self):
        return Review.objects.filter(company__user=self.request.user).select_related("user", "company")


class ReceivedQuoteViewSet(LoggedActionsMixin,
                           mixins.ListModelMixin,
                           mixins.RetrieveModelMixin,
                           mixins.UpdateModelMixin,
                           viewsets.GenericViewSet):
    serializer_class = ReceivedQuoteSerializer
    permission_classes = [IsBusinessUser, require_feature("quotes")]
    pagination_class = DefaultPagination
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["status"]
    http_method_names = ["get", "patch", "head", "options"]

    def get_queryset(self):
        return QuoteRequest.objects.filter(company__user=self.request.user).select_related("user")


# -------- Admin approval queue --------
class PendingCompanyViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = PendingCompanySerializer
    permission_classes = [IsDirectoryAdmin]
    pagination_class = DefaultPagination

    def get_queryset(self):
        return Company.objects.pending().select_related("user").order_by("-created_at")

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        company = approve_company(self.get_object())
        return Response(self.get_serializer(company).data)

    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        reject_company(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)
