from __future__ import annotations

import logging

import requests
from django.conf import settings

from common.exceptions import BackendRequestError

logger = logging.getLogger(__name__)


def create_checkout_session(price_id: str, user_id) -> str:
    """
    Asks the checkout endpoint for a hosted session and returns its URL.
    The paid tier lands on the company later, outside this request.
    """
    cfg = settings.BILLING
    try:
        r = requests.post(
            cfg["CHECKOUT_URL"],
            json={"priceId": price_id, "userId": str(user_id)},
            headers={"Content-Type": "application/json"},
            timeout=cfg["TIMEOUT"],
        )
        r.raise_for_status()
        url = r.json().get("url")
    except (requests.RequestException, ValueError) as e:
        logger.warning("checkout session failed for user=%s: %s", user_id, e)
        raise BackendRequestError() from e
    if not url:
        logger.warning("checkout endpoint answered without a url for user=%s", user_id)
        raise BackendRequestError()
    return url
