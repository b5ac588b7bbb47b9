from __future__ import annotations

from django.db import models
from django.utils import timezone

from common.models import BaseModel


class Lead(BaseModel):
    """
    A logged search or chat query. Rows tied to a company are profile views;
    free-text rows feed demand analytics. Write-heavy: keep it flat.
    """
    query = models.CharField(max_length=500)
    user_location = models.JSONField(blank=True, null=True)  # {"lat": .., "long": ..}
    company = models.ForeignKey(
        "business.Company", on_delete=models.SET_NULL, blank=True, null=True, related_name="leads",
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ("-timestamp",)
        indexes = [models.Index(fields=["company", "timestamp"])]

    def __str__(self):
        return self.query
