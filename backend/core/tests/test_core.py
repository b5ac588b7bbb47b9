import pytest
from django.core.management import call_command
from django.urls import reverse

pytestmark = pytest.mark.django_db


def test_healthz(client):
    resp = client.get(reverse("healthz"))
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_whoami(api_client, client_for, make_user):
    assert api_client.get(reverse("whoami")).json() == {"is_authenticated": False}
    user = make_user("business")
    body = client_for(user).get(reverse("whoami")).json()
    assert body["user_type"] == "business"
    assert body["user_id"] == str(user.id)


def test_options(api_client):
    body = api_client.get(reverse("options")).json()
    assert "Plumbing" in body["services"]
    assert body["regions"] == ["Northern Beaches, NSW", "Brisbane, QLD"]
    assert body["tiers"] == ["basic", "pro", "enterprise"]
    assert body["features"]["analytics"] == "enterprise"
    assert [p["price_aud"] for p in body["plans"]] == [0, 29, 99]


def test_deep_health(api_client):
    body = api_client.get(reverse("deep-health"), {"db": "1", "cache": "1", "celery": "1"}).json()
    assert body["ok"] is True
    assert body["db"] == {"ok": True}
    assert body["celery"] == {"ok": True}


def test_core_check_command(capsys):
    call_command("core_check", "--db", "--json")
    assert '"ok": true' in capsys.readouterr().out


def test_token_auth_app_not_installed(settings):
    assert "rest_framework.authtoken" not in settings.INSTALLED_APPS
    assert settings.REST_AUTH["USE_JWT"] is True
    assert settings.REST_AUTH["TOKEN_MODEL"] is None
