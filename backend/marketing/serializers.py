from rest_framework import serializers

from .models import AD_SPOTS, Ad, AdBooking


class AdSerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(source="company.name", read_only=True)

    class Meta:
        model = Ad
        fields = ("id", "spot", "image_url", "link_url", "company", "company_name")
        read_only_fields = fields


class AdBookingSerializer(serializers.ModelSerializer):
    spot = serializers.ChoiceField(choices=AD_SPOTS)
    company_name = serializers.CharField(source="company.name", read_only=True)

    class Meta:
        model = AdBooking
        fields = ("id", "spot", "image_url", "link_url", "status", "company", "company_name", "created_at")
        read_only_fields = ("id", "status", "company", "company_name", "created_at")
        extra_kwargs = {
            "image_url": {"required": True, "allow_blank": False},
            "link_url": {"required": True, "allow_blank": False},
        }

    def validate_spot(self, spot):
        statuses = self.context.get("spot_status") or {}
        state = statuses.get(spot, "available")
        if state != "available":
            raise serializers.ValidationError(f"Spot {spot} is {state}.")
        return spot


class FbPostSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=120)
    description = serializers.CharField(max_length=2000)
    image = serializers.URLField(required=False, allow_blank=True)
