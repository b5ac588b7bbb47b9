import pytest
from django.urls import reverse

from business.models import Company, QuoteRequest, Review

pytestmark = pytest.mark.django_db


# ---- approval queue ----
def test_pending_queue_is_admin_only(client_for, seeker, make_company):
    make_company(verified=False)
    assert client_for(seeker).get(reverse("pending-company-list")).status_code == 403


def test_approve_and_reject(client_for, admin_user, make_company):
    waiting = make_company(name="Waiting", verified=False)
    doomed = make_company(name="Doomed", verified=False)
    make_company(name="Already Listed")
    client = client_for(admin_user)

    resp = client.get(reverse("pending-company-list"))
    assert resp.status_code == 200
    assert {row["name"] for row in resp.json()["results"]} == {"Waiting", "Doomed"}

    resp = client.post(reverse("pending-company-approve", args=[waiting.id]))
    assert resp.status_code == 200
    assert resp.json()["verified"] is True

    resp = client.post(reverse("pending-company-reject", args=[doomed.id]))
    assert resp.status_code == 204
    assert not Company.objects.filter(id=doomed.id).exists()
    assert Company.objects.pending().count() == 0


# ---- reviews ----
def test_seeker_reviews_listed_company(client_for, seeker, company):
    resp = client_for(seeker).post(reverse("review-list"), {"company": str(company.id), "rating": 4, "comment": "Tidy work"}, format="json")
    assert resp.status_code == 201
    assert resp.json()["author"] == seeker.display_name
    assert Review.objects.get().user == seeker


@pytest.mark.parametrize("rating", [0, 6])
def test_review_rating_bounds(client_for, seeker, company, rating):
    resp = client_for(seeker).post(reverse("review-list"), {"company": str(company.id), "rating": rating}, format="json")
    assert resp.status_code == 400


def test_business_cannot_review(client_for, make_company, company):
    other = make_company(name="Rival")
    resp = client_for(other.user).post(reverse("review-list"), {"company": str(company.id), "rating": 1}, format="json")
    assert resp.status_code == 403


def test_unlisted_company_cannot_be_reviewed(client_for, seeker, make_company):
    hidden = make_company(verified=False)
    resp = client_for(seeker).post(reverse("review-list"), {"company": str(hidden.id), "rating": 5}, format="json")
    assert resp.status_code == 400
    assert "company" in resp.json()["errors"]


def test_business_sees_received_reviews(client_for, seeker, company, make_company):
    other = make_company(name="Other")
    Review.objects.create(company=company, user=seeker, rating=5)
    Review.objects.create(company=other, user=seeker, rating=2)
    resp = client_for(company.user).get(reverse("received-review-list"))
    assert resp.status_code == 200
    assert [r["rating"] for r in resp.json()["results"]] == [5]


# ---- quotes ----
def test_quote_lifecycle(client_for, seeker, company, api_client):
    resp = client_for(seeker).post(reverse("quote-list"), {"company": str(company.id), "message": "Leaking tap"}, format="json")
    assert resp.status_code == 201
    assert resp.json()["status"] == "pending"
    quote_id = resp.json()["id"]

    client = client_for(company.user)
    resp = client.get(reverse("received-quote-list"), {"status": "pending"})
    assert [q["id"] for q in resp.json()["results"]] == [quote_id]

    url = reverse("received-quote-detail", args=[quote_id])
    assert client.patch(url, {"status": "responded"}, format="json").status_code == 200
    # one-directional
    resp = client.patch(url, {"status": "pending"}, format="json")
    assert resp.status_code == 400
    assert "status" in resp.json()["errors"]
    assert client.patch(url, {"status": "closed"}, format="json").status_code == 200
    assert QuoteRequest.objects.get(id=quote_id).status == "closed"


def test_pending_cannot_skip_to_closed(seeker, company):
    quote = QuoteRequest.objects.create(user=seeker, company=company, message="hi")
    assert not quote.can_transition_to("closed")
    assert quote.can_transition_to("responded")


def test_quote_message_required(client_for, seeker, company):
    resp = client_for(seeker).post(reverse("quote-list"), {"company": str(company.id), "message": "   "}, format="json")
    assert resp.status_code == 400


def test_other_business_cannot_touch_quote(client_for, seeker, company, make_company):
    quote = QuoteRequest.objects.create(user=seeker, company=company, message="hi")
    rival = make_company(name="Rival")
    resp = client_for(rival.user).patch(reverse("received-quote-detail", args=[quote.id]), {"status": "responded"}, format="json")
    assert resp.status_code == 404
