from __future__ import annotations

from rest_framework import serializers

from billing.tiers import Tier
from .filters import SORT_MODES, FilterState

LIST_PARAMS = ("tiers", "payment_methods")


class FilterStateSerializer(serializers.Serializer):
    """JSON shape of a `FilterState`; omitted fields take their neutral value."""
    service = serializers.CharField(required=False, allow_blank=True, default="")
    region = serializers.CharField(required=False, allow_blank=True, default="")
    sort_by = serializers.ChoiceField(choices=SORT_MODES, required=False, default="relevance")
    min_rating = serializers.FloatField(min_value=0, max_value=5, required=False, default=0)
    min_years = serializers.IntegerField(min_value=0, required=False, default=0)
    min_employees = serializers.IntegerField(min_value=0, required=False, default=0)
    tiers = serializers.ListField(child=serializers.ChoiceField(choices=Tier.choices), required=False, default=list)
    payment_methods = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    has_insurance = serializers.BooleanField(required=False, default=False)
    has_certifications = serializers.BooleanField(required=False, default=False)
    has_website = serializers.BooleanField(required=False, default=False)
    has_operating_hours = serializers.BooleanField(required=False, default=False)
    has_references = serializers.BooleanField(required=False, default=False)
    has_licenses = serializers.BooleanField(required=False, default=False)
    max_distance = serializers.IntegerField(min_value=0, required=False, default=0)

    def to_state(self) -> FilterState:
        return FilterState(**self.validated_data)


def filter_data_from_query(params) -> dict:
    """Directory query string -> FilterStateSerializer input (`sort`, comma lists)."""
    data = {}
    for name in FilterStateSerializer().fields:
        if name in LIST_PARAMS:
            raw = params.get(name)
            if raw:
                data[name] = [s.strip() for s in raw.split(",") if s.strip()]
        elif name == "sort_by":
            if params.get("sort"):
                data["sort_by"] = params["sort"]
        elif params.get(name) not in (None, ""):
            data[name] = params.get(name)
    return data


class OriginSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90, required=False)
    lng = serializers.FloatField(min_value=-180, max_value=180, required=False)

    def validate(self, attrs):
        if ("lat" in attrs) != ("lng" in attrs):
            raise serializers.ValidationError("Send both lat and lng, or neither.")
        return attrs

    def to_origin(self):
        data = self.validated_data
        return (data["lat"], data["lng"]) if "lat" in data else None


class ChatQuerySerializer(serializers.Serializer):
    query = serializers.CharField(max_length=500, trim_whitespace=True)


__all__ = ["FilterStateSerializer", "OriginSerializer", "ChatQuerySerializer", "filter_data_from_query"]
