from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from business.models import Company
from common.mixins import LoggedActionsMixin, OwnerScopedModelViewSet
from common.permissions import IsSeekerUser
from .models import Favourite, RecentView, SavedSearch
from .serializers import (
    FavouriteSerializer, FavouriteToggleSerializer, RecentViewSerializer, SavedSearchSerializer,
)
from .services import toggle_favourite


class FavouriteViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    GET  /favourite/          my favourites
    POST /favourite/toggle/   {"company": id} -> {"favourited": bool}
    """
    serializer_class = FavouriteSerializer
    permission_classes = [IsSeekerUser]

    def get_queryset(self):
        return Favourite.objects.filter(user=self.request.user).select_related("company")

    @action(detail=False, methods=["post"])
    def toggle(self, request):
        ser = FavouriteToggleSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        company = get_object_or_404(Company.objects.verified(), pk=ser.validated_data["company"])
        return Response({"favourited": toggle_favourite(request.user, company)})


class RecentViewViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = RecentViewSerializer
    permission_classes = [IsSeekerUser]
    pagination_class = None

    def get_queryset(self):
        limit = settings.DIRECTORY["RECENT_VIEWS_LIMIT"]
        qs = RecentView.objects.filter(user=self.request.user).select_related("company")
        return qs.order_by("-viewed_at")[:limit]


class SavedSearchViewSet(LoggedActionsMixin, OwnerScopedModelViewSet):
    queryset = SavedSearch.objects.all()
    serializer_class = SavedSearchSerializer
    permission_classes = [IsSeekerUser]
    http_method_names = ["get", "post", "delete", "head", "options"]
    search_fields = ("name",)
