from rest_framework import serializers

from .tiers import Tier


class SelectPlanSerializer(serializers.Serializer):
    plan = serializers.ChoiceField(choices=Tier.choices)
