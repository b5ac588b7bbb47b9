from rest_framework import serializers

from business.serializers import LocationSerializer
from .models import JOB_TYPES, Job


class JobSerializer(serializers.ModelSerializer):
    location = LocationSerializer(required=False)
    company_name = serializers.CharField(source="company.name", read_only=True, default="")
    is_custom_type = serializers.BooleanField(read_only=True)

    class Meta:
        model = Job
        fields = (
            "id", "title", "description", "location", "job_type", "is_custom_type",
            "pay_rate", "experience_level", "application_deadline",
            "contact_email", "contact_phone", "company", "company_name", "posted_at",
        )
        read_only_fields = ("id", "company", "company_name", "posted_at")

    def validate_job_type(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Pick a job type or enter your own.")
        # normalise case for the fixed categories, keep custom text as typed
        for known in JOB_TYPES:
            if value.lower() == known.lower():
                return known
        return value

    def validate(self, attrs):
        if self.instance is None and not (attrs.get("contact_email") or attrs.get("contact_phone")):
            raise serializers.ValidationError({"contact_email": "Give an email or a phone number."})
        return attrs

    def create(self, validated_data):
        location = validated_data.pop("location", None)
        job = Job(**validated_data)
        if location is not None:
            job.location = location
        job.save()
        return job

    def update(self, instance, validated_data):
        location = validated_data.pop("location", None)
        for field, value in validated_data.items():
            setattr(instance, field, value)
        if location is not None:
            instance.location = location
        instance.save()
        return instance
