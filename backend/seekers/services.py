from __future__ import annotations

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from .models import Favourite, RecentView


def toggle_favourite(user, company) -> bool:
    """Returns True when the company is now a favourite."""
    deleted, _ = Favourite.objects.filter(user=user, company=company).delete()
    if deleted:
        return False
    Favourite.objects.create(user=user, company=company)
    return True


@transaction.atomic
def record_recent_view(user, company) -> RecentView:
    view, created = RecentView.objects.get_or_create(
        user=user, company=company, defaults={"viewed_at": timezone.now()},
    )
    if not created:
        view.viewed_at = timezone.now()
        view.save(update_fields=["viewed_at", "updated_at"])
    limit = settings.DIRECTORY["RECENT_VIEWS_LIMIT"]
    keep = RecentView.objects.filter(user=user).order_by("-viewed_at").values_list("id", flat=True)[:limit]
    RecentView.objects.filter(user=user).exclude(id__in=list(keep)).delete()
    return view
