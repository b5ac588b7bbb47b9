import logging
from urllib.parse import quote

from django.conf import settings
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.permissions import require_feature
from business.selectors import company_for
from common.mixins import DefaultPagination, LoggedActionsMixin
from common.permissions import IsBusinessUser, IsDirectoryAdmin
from .models import Ad, AdBooking
from .serializers import AdBookingSerializer, AdSerializer, FbPostSerializer
from .services import approve_booking, reject_booking, spot_status

logger = logging.getLogger(__name__)


# -------- Ad booking (business) --------
class AdBookingViewSet(LoggedActionsMixin,
                       mixins.ListModelMixin,
                       mixins.CreateModelMixin,
                       viewsets.GenericViewSet):
    """
    GET  /ad-booking/        my bookings plus per-spot status
    POST /ad-booking/        {"spot": 1..3, "image_url": ..., "link_url": ...}
    """
    serializer_class = AdBookingSerializer
    permission_classes = [IsBusinessUser, require_feature("ad_booking")]

    def get_queryset(self):
        return AdBooking.objects.filter(company__user=self.request.user).select_related("company")

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        if self.action == "create":
            ctx["spot_status"] = spot_status(company_for(self.request.user))
        return ctx

    def list(self, request, *args, **kwargs):
        company = company_for(request.user)
        bookings = self.get_serializer(self.get_queryset(), many=True).data
        return Response({"spots": spot_status(company), "results": bookings})

    def perform_create(self, serializer):
        obj = serializer.save(company=company_for(self.request.user))
        self._log_action("create", obj)
        return obj


class ActiveAdsView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        ads = Ad.objects.filter(active=True).select_related("company").order_by("spot")
        return Response(AdSerializer(ads, many=True).data)


# -------- Ad booking queue (admin) --------
class AdBookingQueueViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = AdBookingSerializer
    permission_classes = [IsDirectoryAdmin]
    pagination_class = DefaultPagination

    def get_queryset(self):
        qs = AdBooking.objects.select_related("company").order_by("-created_at")
        if self.action != "list":
            return qs
        st = self.request.query_params.get("status", AdBooking.Status.PENDING)
        return qs if st == "all" else qs.filter(status=st)

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        ad = approve_booking(self.get_object())
        return Response(AdSerializer(ad).data)

    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        booking = reject_booking(self.get_object())
        return Response(self.get_serializer(booking).data, status=status.HTTP_200_OK)


# -------- Facebook group post (business, Pro) --------
class FbPostView(APIView):
    """
    POST /fb-post/ {"title", "description", "image"?}
    Builds the post text and a share link to the public profile.
    """
    permission_classes = [IsBusinessUser, require_feature("fb_post")]

    def post(self, request):
        ser = FbPostSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        company = company_for(request.user)
        data = ser.validated_data
        site = settings.DIRECTORY["PUBLIC_SITE_URL"].rstrip("/")
        profile_url = f"{site}/companies/{company.id}"
        text = f"{data['title']}\n\n{data['description']}\n\n{company.name} - {profile_url}"
        logger.info("fb post composed for company=%s", company.id)
        return Response({
            "group": settings.DIRECTORY["FB_GROUP_NAME"],
            "text": text,
            "image": data.get("image") or None,
            "profile_url": profile_url,
            "share_url": f"https://www.facebook.com/sharer/sharer.php?u={quote(profile_url, safe='')}",
        }, status=status.HTTP_201_CREATED)
