import json
from types import SimpleNamespace
from unittest import mock

import pytest
from openai import APIConnectionError

from aiapp.intent import IntentUnavailable, SearchIntent, resolve_intent
from aiapp.providers import KeywordProvider, OpenAIProvider, ProviderError, closed_set, get_provider


def _completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _client(content=None, error=None):
    client = mock.Mock()
    if error is not None:
        client.chat.completions.create.side_effect = error
    else:
        client.chat.completions.create.return_value = _completion(content)
    return client


@pytest.mark.parametrize("query,expected", [
    ("my hot water is broken, I'm in Manly", {"service": "Plumbing", "region": "Northern Beaches, NSW"}),
    ("Need a SPARKY in Brisbane asap", {"service": "Electrical", "region": "Brisbane, QLD"}),
    ("roof leak in dee why", {"service": "Roofing", "region": "Northern Beaches, NSW"}),
    ("anyone around?", {}),
])
def test_keyword_provider(query, expected):
    assert KeywordProvider().parse(query) == expected


def test_longest_keyword_wins():
    # "roof leak" (Roofing) outranks "leak" (Plumbing)
    assert KeywordProvider().parse("roof leak")["service"] == "Roofing"


@pytest.mark.parametrize("query", ["deck roof", "roof deck"])
def test_equal_length_keywords_keep_dictionary_order(query):
    # "deck" and "roof" are both four letters; Carpentry is listed first
    assert KeywordProvider().parse(query)["service"] == "Carpentry"


def test_closed_set_drops_open_values():
    assert closed_set("Pool Cleaning", "Perth, WA") == {}
    assert closed_set("Painting", None) == {"service": "Painting"}


def test_openai_provider_parses_json():
    client = _client(json.dumps({"service": "Carpentry", "region": "Brisbane, QLD", "budget": "cheap"}))
    assert OpenAIProvider(client=client).parse("deck in brissie") == {
        "service": "Carpentry", "region": "Brisbane, QLD",
    }
    _, kwargs = client.chat.completions.create.call_args
    assert kwargs["response_format"] == {"type": "json_object"}
    assert kwargs["messages"][1] == {"role": "user", "content": "deck in brissie"}


def test_openai_provider_drops_unknown_values():
    client = _client(json.dumps({"service": "Pest Control", "region": "Hobart"}))
    assert OpenAIProvider(client=client).parse("termites") == {}


@pytest.mark.parametrize("client", [
    _client("not json"),
    _client("[1, 2]"),
    _client(error=APIConnectionError(request=mock.Mock())),
])
def test_openai_provider_failures(client):
    with pytest.raises(ProviderError):
        OpenAIProvider(client=client).parse("anything")


def test_resolve_falls_back_to_keywords():
    failing = OpenAIProvider(client=_client("not json"))
    intent = resolve_intent("blocked drain in manly", provider=failing, fallback=True)
    assert intent == SearchIntent(service="Plumbing", region="Northern Beaches, NSW", source="keywords")


def test_resolve_without_fallback_raises():
    failing = OpenAIProvider(client=_client("not json"))
    with pytest.raises(IntentUnavailable):
        resolve_intent("blocked drain in manly", provider=failing, fallback=False)


def test_resolve_uses_llm_answer():
    ok = OpenAIProvider(client=_client('{"service": "Landscaping"}'))
    intent = resolve_intent("tidy my garden", provider=ok)
    assert intent.source == "llm"
    assert intent.redirect == "/directory?service=Landscaping"


def test_get_provider(settings):
    assert isinstance(get_provider(), KeywordProvider)
    assert isinstance(get_provider("llm"), OpenAIProvider)
