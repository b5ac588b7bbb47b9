from unittest import mock

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from business.models import Company
from business.services import license_path

pytestmark = pytest.mark.django_db

PROFILE = {
    "name": "Harbour Plumbing",
    "abn": "51 824 753 556",
    "location": {"address": "1 The Corso, Manly NSW 2095", "lat": -33.7995, "long": 151.2849,
                 "region": "Northern Beaches, NSW"},
    "services": ["Plumbing"],
    "social_links": {"facebook": "https://facebook.com/harbourplumbing"},
    "payment_methods": ["Cash", "Card"],
}


@pytest.fixture
def owner(make_user):
    return make_user("business")


def test_profile_save_sends_listing_for_approval(client_for, owner):
    with mock.patch("business.services.notify_admin_pending_approval.delay") as notify:
        resp = client_for(owner).patch(reverse("company-me"), PROFILE, format="json")
    assert resp.status_code == 200, resp.json()
    body = resp.json()
    assert body["abn"] == "51824753556"
    assert body["location"]["region"] == "Northern Beaches, NSW"
    assert body["verified"] is False

    company = Company.objects.get(user=owner)
    assert company.profile_complete
    assert company.latitude == pytest.approx(-33.7995)
    notify.assert_called_once_with(str(company.id), "Harbour Plumbing")


def test_saving_a_verified_profile_unlists_it(client_for, make_company):
    company = make_company()
    resp = client_for(company.user).patch(reverse("company-me"), {"description": "Since 1999"}, format="json")
    assert resp.status_code == 200
    company.refresh_from_db()
    assert company.verified is False
    assert company.description == "Since 1999"


def test_address_patch_keeps_coordinates(client_for, make_company):
    company = make_company()
    resp = client_for(company.user).patch(
        reverse("company-me"),
        {"location": {"address": "2 New St, Manly", "region": "Northern Beaches, NSW"}},
        format="json",
    )
    assert resp.status_code == 200, resp.json()
    company.refresh_from_db()
    assert company.address == "2 New St, Manly"
    assert company.latitude == pytest.approx(-33.7995)
    assert company.longitude == pytest.approx(151.2849)


@pytest.mark.parametrize("override,field", [
    ({"name": "  "}, "name"),
    ({"abn": "1234"}, "abn"),
    ({"services": []}, "services"),
    ({"location": {"address": "", "region": "Brisbane, QLD"}}, "location"),
    ({"location": {"address": "1 Queen St"}}, "location"),
    ({"services": ["Pool Cleaning"]}, "services"),
    ({"social_links": {"myspace": "https://myspace.com/x"}}, "social_links"),
])
def test_profile_validation(client_for, owner, override, field):
    resp = client_for(owner).patch(reverse("company-me"), {**PROFILE, **override}, format="json")
    assert resp.status_code == 400
    assert field in resp.json()["errors"]
    assert Company.objects.get(user=owner).profile_complete is False


def test_partial_patch_on_empty_stub_is_rejected(client_for, owner):
    resp = client_for(owner).patch(reverse("company-me"), {"name": "Only A Name"}, format="json")
    assert resp.status_code == 400
    assert set(resp.json()["errors"]) >= {"abn", "location", "services"}


def test_seeker_has_no_company_endpoint(client_for, seeker):
    assert client_for(seeker).get(reverse("company-me")).status_code == 403


def test_license_upload_appends(client_for, company):
    client = client_for(company.user)
    first = SimpleUploadedFile("cert one.pdf", b"%PDF-1.4", content_type="application/pdf")
    resp = client.post(reverse("company-licenses"), {"files": [first]}, format="multipart")
    assert resp.status_code == 201
    assert resp.json()["paths"][0].startswith(f"licenses/{company.user_id}/license_0_cert_one")

    second = SimpleUploadedFile("b.png", b"png", content_type="image/png")
    third = SimpleUploadedFile("c.png", b"png", content_type="image/png")
    resp = client.post(reverse("company-licenses"), {"files": [second, third]}, format="multipart")
    paths = resp.json()["paths"]
    assert paths[0].endswith("license_1_b.png")
    assert paths[1].endswith("license_2_c.png")
    company.refresh_from_db()
    assert len(company.licenses) == 3


def test_license_upload_needs_files(client_for, company):
    resp = client_for(company.user).post(reverse("company-licenses"), {}, format="multipart")
    assert resp.status_code == 400


def test_license_path():
    assert license_path("u1", 4, "my licence.pdf") == "licenses/u1/license_4_my_licence.pdf"


def test_preview_includes_rating(client_for, company):
    resp = client_for(company.user).get(reverse("company-preview"))
    assert resp.status_code == 200
    assert resp.json()["name"] == "Acme Plumbing"
    assert resp.json()["rating"] is None


def test_public_profile_only_for_listed(api_client, make_company):
    listed = make_company()
    hidden = make_company(name="Hidden", verified=False)
    resp = api_client.get(reverse("company-detail", args=[listed.id]))
    assert resp.status_code == 200
    assert resp.json()["reviews"] == []
    assert api_client.get(reverse("company-detail", args=[hidden.id])).status_code == 404


def test_seeker_profile_view_is_recorded(client_for, seeker, company):
    resp = client_for(seeker).get(reverse("company-detail", args=[company.id]))
    assert resp.status_code == 200
    assert seeker.recent_views.filter(company=company).exists()
    assert company.leads.get().query == "Profile view: Acme Plumbing"
