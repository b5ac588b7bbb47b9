from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone

from common.models import BaseModel


class Favourite(BaseModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="favourites")
    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="favourited_by")

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.UniqueConstraint(fields=["user", "company"], name="uniq_favourite_per_user"),
        ]


class RecentView(BaseModel):
    """One row per (user, company), refreshed on every view and pruned per user."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="recent_views")
    company = models.ForeignKey("business.Company", on_delete=models.CASCADE, related_name="recent_views")
    viewed_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ("-viewed_at",)
        constraints = [
            models.UniqueConstraint(fields=["user", "company"], name="uniq_recent_view_per_user"),
        ]


class SavedSearch(BaseModel):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="saved_searches")
    name = models.CharField(max_length=120)
    filters = models.JSONField(default=dict, blank=True)  # validated FilterState fields

    class Meta:
        ordering = ("-created_at",)
        verbose_name_plural = "saved searches"

    def __str__(self):
        return self.name
