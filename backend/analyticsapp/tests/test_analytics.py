from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from analyticsapp.models import Lead
from analyticsapp.utils import company_summary, log_lead
from business.models import QuoteRequest, Review
from seekers.services import toggle_favourite

pytestmark = pytest.mark.django_db


@pytest.fixture
def enterprise(make_company):
    return make_company(name="Big Co", tier="enterprise", services=["Plumbing", "Roofing"])


def test_log_lead_trims_and_records_location():
    lead = log_lead("x" * 600, origin=(-33.8, 151.2))
    assert len(lead.query) == 500
    assert lead.user_location == {"lat": -33.8, "long": 151.2}
    assert log_lead("Plumbing in Any").user_location is None


def test_company_summary_counts_window(enterprise, seeker):
    log_lead("Profile view: Big Co", company=enterprise)
    old = log_lead("Profile view: Big Co", company=enterprise)
    Lead.objects.filter(id=old.id).update(timestamp=timezone.now() - timedelta(days=40))
    log_lead("Roofing in Brisbane, QLD")
    log_lead("Painting in Any")
    Review.objects.create(company=enterprise, user=seeker, rating=5)
    QuoteRequest.objects.create(company=enterprise, user=seeker, message="quote please")
    toggle_favourite(seeker, enterprise)

    summary = company_summary(enterprise, "30d")
    assert summary["profile_views"] == 1
    assert summary["search_appearances"] == 1
    assert summary["reviews"] == 1
    assert summary["quote_requests"] == 1
    assert summary["favourites"] == 1
    assert len(summary["views_by_day"]) == 1

    assert company_summary(enterprise, "90d")["profile_views"] == 2
    assert company_summary(enterprise, "1y")["period"] == "30d"


def test_summary_endpoint(client_for, enterprise):
    resp = client_for(enterprise.user).get(reverse("analytics-summary"), {"period": "7d"})
    assert resp.status_code == 200
    assert resp.json()["period"] == "7d"

    resp = client_for(enterprise.user).get(reverse("analytics-summary"), {"period": "1y"})
    assert resp.status_code == 400


def test_summary_gated_below_enterprise(client_for, make_company):
    pro = make_company(tier="pro")
    assert client_for(pro.user).get(reverse("analytics-summary")).status_code == 402


def test_business_dashboard(client_for, enterprise, seeker):
    Review.objects.create(company=enterprise, user=seeker, rating=4, comment="good")
    QuoteRequest.objects.create(company=enterprise, user=seeker, message="quote please")
    log_lead("Profile view: Big Co", company=enterprise)

    body = client_for(enterprise.user).get(reverse("dashboard")).json()
    assert body["company"]["name"] == "Big Co"
    assert body["profile_views"] == 1
    assert body["rating"] == {"average": 4.0, "count": 1}
    assert len(body["latest_reviews"]) == 1
    assert body["pending_quotes"][0]["message"] == "quote please"
    assert body["latest_jobs"] == []
    assert [s["done"] for s in body["onboarding"]] == [True, True, True]


def test_seeker_dashboard(client_for, seeker, company):
    toggle_favourite(seeker, company)
    body = client_for(seeker).get(reverse("dashboard")).json()
    assert body["user_type"] == "seeker"
    assert body["favourites"] == 1
    assert body["saved_searches"] == 0


def test_lead_log_is_admin_only(client_for, admin_user, seeker):
    log_lead("Plumbing in Any")
    assert client_for(seeker).get(reverse("lead-list")).status_code == 403
    assert client_for(admin_user).get(reverse("lead-list")).json()["count"] == 1
