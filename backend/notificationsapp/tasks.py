import logging

import requests
from celery import shared_task
from django.conf import settings

logger = logging.getLogger(__name__)


def _headers():
    h = {"Content-Type": "application/json"}
    token = getattr(settings, "NOTIFY_ADMIN_TOKEN", "")
    if token:
        h["Authorization"] = f"Bearer {token}"
    return h


@shared_task(ignore_result=True)
def notify_admin_pending_approval(company_id: str, company_name: str):
    """
    Fire-and-forget ping to the notify-admin function after a profile save.
    Failures are logged and dropped: no retry, nothing reaches the user.
    """
    url = getattr(settings, "NOTIFY_ADMIN_URL", "")
    if not url:
        logger.info("notify-admin url not configured; skipping company=%s", company_id)
        return False
    try:
        r = requests.post(
            url,
            json={"company_id": company_id, "company_name": company_name},
            headers=_headers(),
            timeout=settings.NOTIFY_ADMIN_TIMEOUT,
        )
        r.raise_for_status()
    except requests.RequestException as e:
        logger.warning("notify-admin failed for company=%s: %s", company_id, e)
        return False
    logger.info("notify-admin sent for company=%s", company_id)
    return True
