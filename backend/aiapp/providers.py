from __future__ import annotations

import json
from typing import Dict, Optional

from django.conf import settings
from openai import OpenAI, OpenAIError

from business.choices import REGIONS, SERVICES
from .vocab import REGION_KEYWORDS, SERVICE_KEYWORDS

SYSTEM_PROMPT = (
    "Parse the user query into a JSON object with 'service' and 'region'. "
    f"Valid services: {', '.join(SERVICES)}. "
    f"Valid regions: {'; '.join(REGIONS)}. "
    "Only use values from these lists. If a value is unclear, omit the key."
)


class ProviderError(Exception):
    """The upstream inference call failed or answered with something unusable."""


def closed_set(service: Optional[str], region: Optional[str]) -> Dict[str, str]:
    # drop anything outside the known services/regions
    out = {}
    if service in SERVICES:
        out["service"] = service
    if region in REGIONS:
        out["region"] = region
    return out


class ProviderBase:
    name = "base"

    def parse(self, query: str) -> Dict[str, str]:
        raise NotImplementedError


# --- Keyword provider: local, no network ---
class KeywordProvider(ProviderBase):
    name = "keywords"

    @staticmethod
    def _best(text: str, vocab: Dict[str, list]) -> Optional[str]:
        best, best_len = None, 0
        for value, keywords in vocab.items():
            for kw in keywords:
                # strictly longer wins; ties stay with the first found
                if kw in text and len(kw) > best_len:
                    best, best_len = value, len(kw)
        return best

    def parse(self, query: str) -> Dict[str, str]:
        text = (query or "").lower()
        return closed_set(self._best(text, SERVICE_KEYWORDS), self._best(text, REGION_KEYWORDS))


# --- OpenAI provider: one chat completion, strict JSON back ---
class OpenAIProvider(ProviderBase):
    name = "llm"

    def __init__(self, client: Optional[OpenAI] = None):
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            cfg = settings.OPENAI
            self._client = OpenAI(api_key=cfg["API_KEY"] or None, timeout=cfg["TIMEOUT"], max_retries=0)
        return self._client

    def parse(self, query: str) -> Dict[str, str]:
        try:
            completion = self.client.chat.completions.create(
                model=settings.OPENAI["MODEL"],
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": query},
                ],
                response_format={"type": "json_object"},
            )
            content = completion.choices[0].message.content or "{}"
            parsed = json.loads(content)
        except (OpenAIError, ValueError, IndexError, AttributeError) as e:
            raise ProviderError(str(e)) from e
        if not isinstance(parsed, dict):
            raise ProviderError("model answered with a non-object")
        return closed_set(parsed.get("service"), parsed.get("region"))


def get_provider(kind: Optional[str] = None) -> ProviderBase:
    kind = kind or settings.SEARCH_INTENT["PROVIDER"]
    if kind == OpenAIProvider.name:
        return OpenAIProvider()
    return KeywordProvider()
