from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from common.models import BaseModel

AD_SPOTS = (1, 2, 3)


class Ad(BaseModel):
    """The live banner in a home page spot; at most one active ad per spot."""
    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="ads")
    spot = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(3)])
    image_url = models.URLField()
    link_url = models.URLField()
    active = models.BooleanField(default=True, db_index=True)
    booking = models.OneToOneField(
        "marketing.AdBooking", on_delete=models.SET_NULL, blank=True, null=True, related_name="ad",
    )

    class Meta:
        ordering = ("spot",)
        constraints = [
            models.UniqueConstraint(
                fields=["spot"], condition=models.Q(active=True), name="uniq_active_ad_per_spot",
            ),
        ]


class AdBooking(BaseModel):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="ad_bookings")
    spot = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(3)])
    image_url = models.URLField()
    link_url = models.URLField()
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self):
        return f"spot {self.spot} [{self.status}]"
