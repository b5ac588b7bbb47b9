# backend/business/serializers.py
from __future__ import annotations

import dataclasses
import re

from rest_framework import serializers

from .choices import SERVICES, SOCIAL_NETWORKS
from .models import Company, Location, QuoteRequest, Review

ABN_RE = re.compile(r"^\d{11}$")


# ---------- Value objects ----------
class LocationSerializer(serializers.Serializer):
    address = serializers.CharField(allow_blank=True, required=False, default="")
    lat = serializers.FloatField(allow_null=True, required=False, default=None)
    long = serializers.FloatField(allow_null=True, required=False, default=None)
    region = serializers.CharField(allow_blank=True, required=False, default="")

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        # a partial save only touches the keys sent
        current = getattr(getattr(self.parent, "instance", None), "location", None)
        if self.root.partial and current is not None:
            return dataclasses.replace(current, **values)
        return Location(**values)


class SocialLinksSerializer(serializers.Serializer):
    def get_fields(self):
        return {name: serializers.URLField(required=False, allow_blank=True) for name in SOCIAL_NETWORKS}

    def to_internal_value(self, data):
        extra = set(data or {}) - set(SOCIAL_NETWORKS)
        if extra:
            raise serializers.ValidationError(f"Unknown networks: {', '.join(sorted(extra))}")
        cleaned = super().to_internal_value(data)
        return {k: v for k, v in cleaned.items() if v}

    def to_representation(self, instance):
        return {k: v for k, v in (instance or {}).items() if k in SOCIAL_NETWORKS and v}


def _string_list(**kwargs):
    return serializers.ListField(child=serializers.CharField(max_length=200), required=False, **kwargs)


# ---------- Company ----------
class CompanyProfileSerializer(serializers.ModelSerializer):
    """
    Owner view of the company. Validates the merged result of a PATCH, so a
    partial save can never leave the profile incomplete.
    """
    abn = serializers.CharField(max_length=20, required=False, allow_blank=True)  # spaces stripped below
    location = LocationSerializer(required=False)
    services = serializers.ListField(child=serializers.ChoiceField(choices=SERVICES), required=False)
    certifications = _string_list()
    payment_methods = _string_list()
    areas_serviced = _string_list()
    references = _string_list()
    social_links = SocialLinksSerializer(required=False)

    class Meta:
        model = Company
        fields = (
            "id", "name", "abn", "location", "services",
            "description", "website", "phone", "email",
            "years_in_business", "number_of_employees",
            "certifications", "insurance_details", "operating_hours",
            "payment_methods", "areas_serviced", "references",
            "social_links", "google_reviews_url", "licenses",
            "subscription_tier", "verified", "created_at", "updated_at",
        )
        read_only_fields = ("id", "licenses", "subscription_tier", "verified", "created_at", "updated_at")

    def validate_abn(self, value):
        value = re.sub(r"\s+", "", value or "")
        if not ABN_RE.match(value):
            raise serializers.ValidationError("ABN must be exactly 11 digits.")
        return value

    def validate(self, attrs):
        inst = self.instance
        name = attrs.get("name", getattr(inst, "name", ""))
        abn = attrs.get("abn", getattr(inst, "abn", ""))
        location = attrs.get("location", inst.location if inst else Location())
        services = attrs.get("services", getattr(inst, "services", []))

        errors = {}
        if not (name or "").strip():
            errors["name"] = "Business name is required."
        if not ABN_RE.match(abn or ""):
            errors["abn"] = "ABN must be exactly 11 digits."
        if not location.address.strip():
            errors["location"] = "Address is required."
        elif not location.region.strip():
            errors["location"] = "Region is required."
        if not services:
            errors["services"] = "Select at least one service."
        if errors:
            raise serializers.ValidationError(errors)
        return attrs

    def update(self, instance, validated_data):
        from .services import save_profile
        return save_profile(instance, validated_data)


class CompanyPublicSerializer(serializers.ModelSerializer):
    location = LocationSerializer(read_only=True)
    social_links = SocialLinksSerializer(read_only=True)

    class Meta:
        model = Company
        fields = (
            "id", "name", "location", "services", "subscription_tier",
            "description", "website", "phone", "email",
            "years_in_business", "number_of_employees",
            "certifications", "insurance_details", "operating_hours",
            "payment_methods", "areas_serviced", "references",
            "social_links", "google_reviews_url", "licenses", "verified",
        )
        read_only_fields = fields


class RatingSummarySerializer(serializers.Serializer):
    average = serializers.FloatField()
    count = serializers.IntegerField()


class PendingCompanySerializer(serializers.ModelSerializer):
    owner_email = serializers.EmailField(source="user.email", read_only=True)
    location = LocationSerializer(read_only=True)

    class Meta:
        model = Company
        fields = ("id", "name", "abn", "location", "services", "owner_email", "verified", "created_at", "updated_at")
        read_only_fields = fields


class LicenseUploadSerializer(serializers.Serializer):
    files = serializers.ListField(child=serializers.FileField(), allow_empty=False)


# ---------- Reviews ----------
class ReviewSerializer(serializers.ModelSerializer):
    author = serializers.CharField(source="user.display_name", read_only=True)
    company_name = serializers.CharField(source="company.name", read_only=True)

    class Meta:
        model = Review
        fields = ("id", "company", "company_name", "rating", "comment", "author", "created_at")
        read_only_fields = ("id", "author", "company_name", "created_at")

    def validate_company(self, company):
        if not company.verified:
            raise serializers.ValidationError("This company is not listed.")
        return company


# ---------- Quote requests ----------
class QuoteRequestSerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(source="company.name", read_only=True)

    class Meta:
        model = QuoteRequest
        fields = ("id", "company", "company_name", "message", "status", "created_at", "updated_at")
        read_only_fields = ("id", "company_name", "status", "created_at", "updated_at")

    def validate_company(self, company):
        if not company.verified:
            raise serializers.ValidationError("This company is not listed.")
        return company

    def validate_message(self, value):
        if not value.strip():
            raise serializers.ValidationError("Message is required.")
        return value


class ReceivedQuoteSerializer(serializers.ModelSerializer):
    requester = serializers.CharField(source="user.display_name", read_only=True)
    requester_email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = QuoteRequest
        fields = ("id", "requester", "requester_email", "message", "status", "created_at", "updated_at")
        read_only_fields = ("id", "requester", "requester_email", "message", "created_at", "updated_at")

    def update(self, instance, validated_data):
        from .services import change_quote_status
        return change_quote_status(instance, validated_data.get("status", instance.status))
