from rest_framework import serializers

from .models import Lead
from .utils import PERIOD_DAYS


class PeriodSerializer(serializers.Serializer):
    period = serializers.ChoiceField(choices=tuple(PERIOD_DAYS), required=False, default="30d")


class LeadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Lead
        fields = ("id", "query", "user_location", "company", "timestamp")
        read_only_fields = fields
