from __future__ import annotations

from urllib.parse import urlencode

from rest_framework import serializers

from business.serializers import CompanyPublicSerializer
from searchapp.filters import FilterState
from searchapp.serializers import FilterStateSerializer
from .models import Favourite, RecentView, SavedSearch


class FavouriteSerializer(serializers.ModelSerializer):
    company_detail = CompanyPublicSerializer(source="company", read_only=True)

    class Meta:
        model = Favourite
        fields = ("id", "company", "company_detail", "created_at")
        read_only_fields = ("id", "company_detail", "created_at")


class FavouriteToggleSerializer(serializers.Serializer):
    company = serializers.UUIDField()


class RecentViewSerializer(serializers.ModelSerializer):
    company_detail = CompanyPublicSerializer(source="company", read_only=True)

    class Meta:
        model = RecentView
        fields = ("id", "company", "company_detail", "viewed_at")
        read_only_fields = fields


class SavedSearchSerializer(serializers.ModelSerializer):
    filters = FilterStateSerializer(required=False)
    directory_url = serializers.SerializerMethodField()

    class Meta:
        model = SavedSearch
        fields = ("id", "name", "filters", "directory_url", "created_at")
        read_only_fields = ("id", "directory_url", "created_at")

    def get_directory_url(self, obj) -> str:
        state = FilterState(**(obj.filters or {}))
        query = urlencode(state.as_query())
        return f"/directory?{query}" if query else "/directory"

    def create(self, validated_data):
        validated_data["filters"] = dict(validated_data.get("filters") or {})
        return SavedSearch.objects.create(**validated_data)
