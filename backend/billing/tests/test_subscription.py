from unittest import mock

import pytest
import requests
from django.urls import reverse

pytestmark = pytest.mark.django_db

LIST_URL = "/api/v1/billing/subscription/"
SELECT_URL = "/api/v1/billing/subscription/select/"


def test_subscription_overview(client_for, make_company):
    company = make_company(tier="pro")
    resp = client_for(company.user).get(LIST_URL)
    assert resp.status_code == 200
    body = resp.json()
    assert body["tier"] == "pro"
    assert body["features"]["post_jobs"] is True
    assert body["features"]["analytics"] is False
    assert [s["key"] for s in body["onboarding"]] == ["sign_up", "complete_profile", "choose_plan"]
    assert body["onboarding"][2]["done"] is True


def test_seekers_cannot_manage_subscriptions(client_for, seeker):
    assert client_for(seeker).get(LIST_URL).status_code == 403


def test_select_basic_updates_directly(client_for, make_company):
    company = make_company(tier="pro", subscription_id="sub_123")
    with mock.patch("billing.checkout.requests.post") as post:
        resp = client_for(company.user).post(SELECT_URL, {"plan": "basic"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"tier": "basic"}
    post.assert_not_called()
    company.refresh_from_db()
    assert company.tier == "basic"
    assert company.subscription_id is None


def test_select_paid_plan_returns_checkout_url(client_for, company):
    fake = mock.Mock()
    fake.json.return_value = {"url": "https://checkout.test/session/abc"}
    fake.raise_for_status.return_value = None
    with mock.patch("billing.checkout.requests.post", return_value=fake) as post:
        resp = client_for(company.user).post(SELECT_URL, {"plan": "pro"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"checkout_url": "https://checkout.test/session/abc"}
    _, kwargs = post.call_args
    assert kwargs["json"] == {"priceId": "price_pro_test", "userId": str(company.user_id)}
    company.refresh_from_db()
    assert company.tier == "basic"  # the tier lands later, via checkout


def test_checkout_failure_is_a_503(client_for, company):
    with mock.patch("billing.checkout.requests.post", side_effect=requests.ConnectionError("down")):
        resp = client_for(company.user).post(SELECT_URL, {"plan": "enterprise"}, format="json")
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Something went wrong. Please try again."


def test_feature_gate_is_a_402(client_for, company):
    resp = client_for(company.user).get(reverse("analytics-summary"))
    assert resp.status_code == 402
    body = resp.json()
    assert body["code"] == "upgrade_required"
    assert body["feature"] == "analytics"
    assert body["required_tier"] == "enterprise"
    assert body["current_tier"] == "basic"
