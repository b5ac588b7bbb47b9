from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from django.conf import settings

from common.exceptions import BackendRequestError
from .providers import KeywordProvider, ProviderBase, ProviderError, get_provider

logger = logging.getLogger(__name__)

RETRY_PROMPT = "Failed to process query. Try again."


class IntentUnavailable(BackendRequestError):
    default_detail = RETRY_PROMPT
    default_code = "intent_unavailable"


@dataclass(frozen=True)
class SearchIntent:
    service: Optional[str] = None
    region: Optional[str] = None
    source: str = "keywords"

    def as_params(self) -> dict:
        params = {}
        if self.service:
            params["service"] = self.service
        if self.region:
            params["region"] = self.region
        return params

    @property
    def redirect(self) -> str:
        query = urlencode(self.as_params())
        return f"/directory?{query}" if query else "/directory"


def resolve_intent(query: str, provider: Optional[ProviderBase] = None, fallback: Optional[bool] = None) -> SearchIntent:
    """
    Free text -> (service, region). When the configured provider fails the
    keyword matcher answers instead, unless fallback is switched off.
    """
    provider = provider or get_provider()
    if fallback is None:
        fallback = settings.SEARCH_INTENT["FALLBACK"]
    try:
        parsed = provider.parse(query)
        source = provider.name
    except ProviderError as e:
        if not fallback:
            logger.warning("search intent via %s failed, no fallback: %s", provider.name, e)
            raise IntentUnavailable() from e
        logger.warning("search intent via %s failed, using keywords: %s", provider.name, e)
        parsed = KeywordProvider().parse(query)
        source = KeywordProvider.name
    return SearchIntent(service=parsed.get("service"), region=parsed.get("region"), source=source)
