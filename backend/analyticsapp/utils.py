from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional, Tuple

from django.db.models import Count, Q
from django.db.models.functions import TruncDate
from django.utils import timezone

from .models import Lead

PERIOD_DAYS = {"7d": 7, "30d": 30, "90d": 90}


def log_lead(query: str, origin: Optional[Tuple[float, float]] = None, company=None) -> Lead:
    location = {"lat": origin[0], "long": origin[1]} if origin else None
    return Lead.objects.create(query=query[:500], user_location=location, company=company)


def company_summary(company, period: str = "30d") -> Dict[str, Any]:
    """
    Counts inside the window for one company: profile views (leads tied to it),
    reviews and quote requests. Favourites are all-time.
    """
    days = PERIOD_DAYS.get(period, 30)
    since = timezone.now() - timedelta(days=days)
    leads = Lead.objects.filter(company=company, timestamp__gte=since)
    per_day = (
        leads.annotate(d=TruncDate("timestamp"))
        .values("d")
        .annotate(c=Count("id"))
        .order_by("d")
    )
    # directory and chat queries naming one of the company's services
    mentions = Q()
    for service in company.services or []:
        mentions |= Q(query__icontains=service)
    appearances = (
        Lead.objects.filter(company__isnull=True, timestamp__gte=since).filter(mentions).count()
        if company.services else 0
    )
    return {
        "period": period if period in PERIOD_DAYS else "30d",
        "since": since.isoformat(),
        "profile_views": leads.count(),
        "search_appearances": appearances,
        "reviews": company.reviews.filter(created_at__gte=since).count(),
        "quote_requests": company.quote_requests.filter(created_at__gte=since).count(),
        "favourites": company.favourited_by.count(),
        "views_by_day": [{"date": row["d"].isoformat(), "count": row["c"]} for row in per_day],
    }
