from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from billing.tiers import Tier
from common.models import BaseModel


@dataclass(frozen=True)
class Location:
    """Street address plus coordinates; a zero or missing coordinate means unknown."""
    address: str = ""
    lat: Optional[float] = None
    long: Optional[float] = None
    region: str = ""

    @property
    def has_coordinates(self) -> bool:
        return bool(self.lat) and bool(self.long)


class CompanyQuerySet(models.QuerySet):
    def verified(self):
        return self.filter(verified=True)

    def pending(self):
        return self.filter(verified=False)

    def by_tier(self):
        # enterprise, pro, basic; insertion order inside a tier
        rank = models.Case(
            models.When(subscription_tier=Tier.ENTERPRISE, then=models.Value(2)),
            models.When(subscription_tier=Tier.PRO, then=models.Value(1)),
            default=models.Value(0),
            output_field=models.IntegerField(),
        )
        return self.annotate(tier_rank=rank).order_by("-tier_rank", "created_at")


class Company(BaseModel):
    """
    A trade business listing. Created empty at signup; only verified companies
    appear in the public directory. Location is stored flat and exposed as `Location`.
    """
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="company")

    name = models.CharField(max_length=200, blank=True, default="")
    abn = models.CharField(max_length=11, blank=True, default="")

    # location
    address = models.CharField(max_length=255, blank=True, default="")
    latitude = models.FloatField(blank=True, null=True)
    longitude = models.FloatField(blank=True, null=True)
    region = models.CharField(max_length=120, blank=True, default="", db_index=True)

    services = models.JSONField(default=list, blank=True)

    # subscription
    subscription_tier = models.CharField(max_length=16, choices=Tier.choices, default=Tier.BASIC)
    subscription_id = models.CharField(max_length=120, blank=True, null=True)
    verified = models.BooleanField(default=False, db_index=True)

    # optional profile
    description = models.TextField(blank=True, default="")
    website = models.URLField(blank=True, default="")
    phone = models.CharField(max_length=30, blank=True, default="")
    email = models.EmailField(blank=True, default="")
    years_in_business = models.PositiveIntegerField(blank=True, null=True)
    number_of_employees = models.PositiveIntegerField(blank=True, null=True)
    certifications = models.JSONField(default=list, blank=True)
    insurance_details = models.TextField(blank=True, default="")
    operating_hours = models.TextField(blank=True, default="")
    payment_methods = models.JSONField(default=list, blank=True)
    areas_serviced = models.JSONField(default=list, blank=True)
    references = models.JSONField(default=list, blank=True)
    social_links = models.JSONField(default=dict, blank=True)  # {facebook: url, ...}
    google_reviews_url = models.URLField(blank=True, default="")
    licenses = models.JSONField(default=list, blank=True)  # storage paths

    objects = CompanyQuerySet.as_manager()

    class Meta:
        ordering = ("created_at",)
        verbose_name_plural = "companies"
        indexes = [
            models.Index(fields=["verified", "subscription_tier"]),
        ]

    def __str__(self):
        return self.name or f"(unnamed company of {self.user_id})"

    @property
    def location(self) -> Location:
        return Location(address=self.address, lat=self.latitude, long=self.longitude, region=self.region)

    @location.setter
    def location(self, value: Location):
        self.address = value.address
        self.latitude = value.lat
        self.longitude = value.long
        self.region = value.region

    @property
    def tier(self) -> str:
        return (self.subscription_tier or Tier.BASIC).lower()

    @property
    def profile_complete(self) -> bool:
        return bool(self.name and self.abn and self.address and self.services)


class Review(BaseModel):
    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="reviews")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews")
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(blank=True, default="")

    class Meta:
        ordering = ("-created_at",)
        indexes = [models.Index(fields=["company", "-created_at"])]

    def __str__(self):
        return f"{self.rating}* for {self.company_id}"


class QuoteRequest(BaseModel):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        RESPONDED = "responded", "Responded"
        CLOSED = "closed", "Closed"

    # one-directional: pending -> responded -> closed
    TRANSITIONS = {
        "pending": ("responded",),
        "responded": ("closed",),
        "closed": (),
    }

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="quote_requests")
    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="quote_requests")
    message = models.TextField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)

    class Meta:
        ordering = ("-created_at",)
        indexes = [models.Index(fields=["company", "status"])]

    def can_transition_to(self, new_status: str) -> bool:
        return new_status in self.TRANSITIONS.get(self.status, ())

    def __str__(self):
        return f"quote {self.id} [{self.status}]"
