import itertools

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from business.models import Company, Location
from identity.services import register_user

User = get_user_model()

_seq = itertools.count(1)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(user_type="seeker", **extra):
        email = extra.pop("email", f"user{next(_seq)}@example.com")
        user = register_user(email=email, password="secret-123", user_type=user_type)
        for k, v in extra.items():
            setattr(user, k, v)
        if extra:
            user.save()
        return user
    return _make


@pytest.fixture
def seeker(make_user):
    return make_user("seeker")


@pytest.fixture
def admin_user(make_user):
    return make_user("seeker", is_staff=True)


@pytest.fixture
def make_company(make_user):
    """Business owner plus a listed company; pass attrs to override."""
    def _make(name="Acme Plumbing", tier="basic", verified=True, location=None, **attrs):
        owner = make_user("business")
        company = owner.company
        company.name = name
        company.abn = "51824753556"
        company.location = location or Location(
            address="1 The Corso, Manly NSW 2095", lat=-33.7995, long=151.2849, region="Northern Beaches, NSW",
        )
        company.services = attrs.pop("services", ["Plumbing"])
        company.subscription_tier = tier
        company.verified = verified
        for k, v in attrs.items():
            setattr(company, k, v)
        company.save()
        return company
    return _make


@pytest.fixture
def company(make_company):
    return make_company()


@pytest.fixture
def client_for(api_client):
    def _as(user):
        api_client.force_authenticate(user)
        return api_client
    return _as
