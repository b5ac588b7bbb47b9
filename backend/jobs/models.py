from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone

from common.models import BaseModel

# Fixed categories; any other non-empty string is a custom type.
JOB_TYPES = (
    "Full-time",
    "Part-time",
    "Contract",
    "Casual",
    "Apprenticeship/Traineeship",
    "Subcontractor",
    "Labour Hire",
)


class Job(BaseModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="jobs")
    company = models.ForeignKey(
        "business.Company", on_delete=models.SET_NULL, blank=True, null=True, related_name="jobs",
    )

    title = models.CharField(max_length=200)
    description = models.TextField()

    # location
    address = models.CharField(max_length=255, blank=True, default="")
    latitude = models.FloatField(blank=True, null=True)
    longitude = models.FloatField(blank=True, null=True)
    region = models.CharField(max_length=120, blank=True, default="")

    job_type = models.CharField(max_length=80, default=JOB_TYPES[0], db_index=True)
    pay_rate = models.CharField(max_length=80, blank=True, default="")
    experience_level = models.CharField(max_length=80, blank=True, default="")
    application_deadline = models.DateField(blank=True, null=True)
    contact_email = models.EmailField(blank=True, default="")
    contact_phone = models.CharField(max_length=30, blank=True, default="")
    posted_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ("-posted_at",)

    def __str__(self):
        return self.title

    @property
    def is_custom_type(self) -> bool:
        return self.job_type not in JOB_TYPES

    @property
    def location(self):
        from business.models import Location
        return Location(address=self.address, lat=self.latitude, long=self.longitude, region=self.region)

    @location.setter
    def location(self, value):
        self.address = value.address
        self.latitude = value.lat
        self.longitude = value.long
        self.region = value.region
