from __future__ import annotations

import logging
from typing import Iterable, List

from django.core.files.storage import default_storage
from django.db import transaction
from django.utils.text import get_valid_filename
from rest_framework.exceptions import ValidationError

from notificationsapp.tasks import notify_admin_pending_approval
from .models import Company

logger = logging.getLogger(__name__)


def ensure_company_stub(user) -> Company:
    company, created = Company.objects.get_or_create(user=user)
    if created:
        logger.info("company stub created for user=%s", user.id)
    return company


def save_profile(company: Company, data: dict) -> Company:
    """
    Owner profile save. Any change sends the listing back to the approval
    queue and pings the administrator.
    """
    with transaction.atomic():
        for field, value in data.items():
            setattr(company, field, value)
        company.verified = False
        company.save()
    notify_admin_pending_approval.delay(str(company.id), company.name)
    return company


def license_path(user_id, index: int, filename: str) -> str:
    return f"licenses/{user_id}/license_{index}_{get_valid_filename(filename)}"


def upload_licenses(company: Company, files: Iterable) -> List[str]:
    start = len(company.licenses or [])
    paths = []
    for offset, f in enumerate(files):
        stored = default_storage.save(license_path(company.user_id, start + offset, f.name), f)
        paths.append(stored)
    company.licenses = list(company.licenses or []) + paths
    company.save(update_fields=["licenses", "updated_at"])
    logger.info("stored %d license file(s) for company=%s", len(paths), company.id)
    return paths


def approve_company(company: Company) -> Company:
    company.verified = True
    company.save(update_fields=["verified", "updated_at"])
    logger.info("company %s approved", company.id)
    return company


def reject_company(company: Company) -> None:
    logger.info("company %s rejected and removed", company.id)
    company.delete()


def change_quote_status(quote, new_status: str):
    if new_status == quote.status:
        return quote
    if not quote.can_transition_to(new_status):
        raise ValidationError({"status": f"Cannot move a {quote.status} quote to {new_status}."})
    quote.status = new_status
    quote.save(update_fields=["status", "updated_at"])
    return quote
