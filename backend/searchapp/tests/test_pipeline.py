import itertools
import uuid
from types import SimpleNamespace

import pytest

from business.models import Location
from searchapp.aggregation import RatingSummary, aggregate_reviews, round_rating
from searchapp.filters import SORT_MODES, FilterState, apply_filters
from searchapp.geo import distance_km, haversine_m
from searchapp.sorting import sort_companies

MANLY = (-33.7995, 151.2849)
DEE_WHY = (-33.7521, 151.2867)
BRISBANE = (-27.4689, 153.0235)


def _company(tier="basic", years=None, **kw):
    loc = kw.pop("location", Location(address="x", lat=MANLY[0], long=MANLY[1], region="Northern Beaches, NSW"))
    base = dict(
        id=uuid.uuid4(), subscription_tier=tier, years_in_business=years, number_of_employees=None,
        services=["Plumbing"], payment_methods=[], insurance_details="", certifications=[],
        website="", operating_hours="", references=[], licenses=[], location=loc,
    )
    base.update(kw)
    return SimpleNamespace(**base)


# ---- geo ----
def test_haversine_is_symmetric_and_zero_on_self():
    assert haversine_m(MANLY, MANLY) == 0
    assert haversine_m(MANLY, BRISBANE) == haversine_m(BRISBANE, MANLY)


def test_distance_km_rounds_to_whole_km():
    km = distance_km(MANLY, Location(lat=DEE_WHY[0], long=DEE_WHY[1]))
    assert km == 5
    assert 700 < distance_km(MANLY, Location(lat=BRISBANE[0], long=BRISBANE[1])) < 800


@pytest.mark.parametrize("origin,loc", [
    (None, Location(lat=-33.0, long=151.0)),
    (MANLY, Location(lat=None, long=151.0)),
    (MANLY, Location(lat=0, long=151.0)),
])
def test_distance_unknown(origin, loc):
    assert distance_km(origin, loc) is None


# ---- aggregation ----
def test_aggregate_reviews_averages_half_up():
    ratings = aggregate_reviews([("a", 5), ("a", 4), ("b", 3), ("a", 4), ("c", 4), ("c", 5)])
    assert ratings["a"] == RatingSummary(average=4.3, count=3)
    assert ratings["b"] == RatingSummary(average=3.0, count=1)
    assert ratings["c"].average == 4.5
    assert "d" not in ratings


def test_round_rating_half_up():
    assert round_rating(9, 2) == 4.5
    assert round_rating(5, 4) == 1.3  # 1.25 -> 1.3


# ---- filters and sort ----
def test_min_rating_then_years_sort():
    first = _company(tier="pro", years=10)
    second = _company(tier="basic", years=1)
    ratings = {first.id: RatingSummary(4.5, 2), second.id: RatingSummary(3.0, 1)}

    assert apply_filters([first, second], FilterState(min_rating=4), ratings) == [first]
    assert sort_companies([first, second], "years", ratings) == [first, second]
    assert sort_companies([second, first], "years", ratings) == [first, second]


def test_neutral_state_keeps_everything_in_order():
    items = [_company(), _company(services=["Roofing"]), _company(tier="pro")]
    assert apply_filters(items, FilterState(), {}) == items


def test_unrated_companies_fail_min_rating():
    unrated = _company()
    assert apply_filters([unrated], FilterState(min_rating=1), {}) == []


def test_service_region_tier_and_flags():
    a = _company(services=["Plumbing", "Roofing"], website="https://a.test", tier="PRO")
    b = _company(services=["Roofing"], location=Location(address="y", lat=BRISBANE[0], long=BRISBANE[1], region="Brisbane, QLD"))
    c = _company(services=["Roofing"], payment_methods=["Cash"], insurance_details="Public liability $20m")
    items = [a, b, c]

    assert apply_filters(items, FilterState(service="Roofing"), {}) == [a, b, c]
    assert apply_filters(items, FilterState(region="Brisbane, QLD"), {}) == [b]
    assert apply_filters(items, FilterState(tiers=["pro"]), {}) == [a]
    assert apply_filters(items, FilterState(has_website=True), {}) == [a]
    assert apply_filters(items, FilterState(has_insurance=True, payment_methods=["Cash", "Card"]), {}) == [c]



def test_min_years_and_employees_count_missing_as_zero():
    unknown = _company()
    small = _company(years=5, number_of_employees=2)
    large = _company(years=12, number_of_employees=20)
    items = [unknown, small, large]

    assert apply_filters(items, FilterState(min_years=5), {}) == [small, large]
    assert apply_filters(items, FilterState(min_years=13), {}) == []
    assert apply_filters(items, FilterState(min_employees=3), {}) == [large]
    assert apply_filters(items, FilterState(min_employees=1), {}) == [small, large]
    assert apply_filters(items, FilterState(min_years=0, min_employees=0), {}) == items


@pytest.mark.parametrize("flag,attr,value", [
    ("has_insurance", "insurance_details", "Public liability 20m"),
    ("has_certifications", "certifications", ["Licensed plumber"]),
    ("has_website", "website", "https://example.test"),
    ("has_operating_hours", "operating_hours", "Mon-Fri 7am-5pm"),
    ("has_references", "references", ["Jane Citizen, 0400 000 000"]),
    ("has_licenses", "licenses", ["licenses/acme/licence.pdf"]),
])
def test_presence_flags(flag, attr, value):
    without = _company()
    with_it = _company(**{attr: value})
    assert apply_filters([without, with_it], FilterState(**{flag: True}), {}) == [with_it]
    assert apply_filters([without, with_it], FilterState(), {}) == [without, with_it]


def _population():
    brisbane = Location(address="y", lat=BRISBANE[0], long=BRISBANE[1], region="Brisbane, QLD")
    items = [
        _company(tier="pro", years=10, website="https://a.test", number_of_employees=8),
        _company(tier="pro", years=2, website="https://b.test"),
        _company(tier="pro", years=10, number_of_employees=3),
        _company(tier="pro", years=10, website="https://d.test", services=["Roofing"]),
        _company(tier="basic", years=10, website="https://e.test", payment_methods=["Cash"]),
        _company(tier="pro", years=10, website="https://f.test", location=brisbane),
        _company(tier="enterprise", years=15, website="https://g.test", payment_methods=["Card"]),
    ]
    ratings = {c.id: RatingSummary(4.0 + i / 10, i + 1) for i, c in enumerate(items[:-1])}
    return items, ratings


@pytest.mark.parametrize("filters", [
    dict(service="Plumbing", min_rating=4, min_years=5, tiers=["pro"], has_website=True, max_distance=50),
    dict(region="Northern Beaches, NSW", min_employees=1, tiers=["pro", "enterprise"], min_rating=4.1),
    dict(payment_methods=["Cash", "Card"], min_years=10, has_website=True),
])
def test_filters_are_a_conjunction_in_any_order(filters):
    items, ratings = _population()
    state = FilterState(**filters)
    preds = state.predicates_for(ratings, DEE_WHY)
    assert len(preds) == len(filters)

    singles = [apply_filters(items, FilterState(**{k: v}), ratings, DEE_WHY) for k, v in filters.items()]
    expected = [c for c in items if all(c in kept for kept in singles)]
    assert apply_filters(items, state, ratings, DEE_WHY) == expected
    for order in itertools.permutations(preds):
        assert [c for c in items if all(p(c) for p in order)] == expected


@pytest.mark.parametrize("mode", SORT_MODES)
def test_sorting_twice_changes_nothing(mode):
    items, ratings = _population()
    items.append(_company(location=Location(address="z")))
    once = sort_companies(items, mode, ratings, origin=DEE_WHY)
    assert sorted(id(c) for c in once) == sorted(id(c) for c in items)
    assert sort_companies(once, mode, ratings, origin=DEE_WHY) == once


def test_max_distance_needs_an_origin():
    near = _company()
    far = _company(location=Location(address="y", lat=BRISBANE[0], long=BRISBANE[1], region="Brisbane, QLD"))
    nowhere = _company(location=Location(address="z", region="Brisbane, QLD"))
    state = FilterState(max_distance=50)

    assert apply_filters([near, far, nowhere], state, {}, origin=DEE_WHY) == [near]
    assert apply_filters([near, far, nowhere], state, {}, origin=None) == [near, far, nowhere]


def test_sort_modes():
    a, b, c = _company(), _company(), _company(location=Location(address="z"))
    ratings = {a.id: RatingSummary(3.5, 10), b.id: RatingSummary(4.8, 2)}

    assert sort_companies([a, b, c], "rating", ratings) == [b, a, c]
    assert sort_companies([a, b, c], "reviews", ratings) == [a, b, c]
    assert sort_companies([c, a, b], "relevance", ratings) == [c, a, b]
    # unknown distances go last; without an origin nothing moves
    assert sort_companies([c, a], "distance", ratings, origin=DEE_WHY) == [a, c]
    assert sort_companies([c, a], "distance", ratings) == [c, a]
    with pytest.raises(ValueError):
        sort_companies([a], "cheapest", ratings)


def test_filter_state_query_string_drops_neutral_values():
    state = FilterState(service="Plumbing", sort_by="rating", min_rating=4, tiers=["pro", "enterprise"], has_licenses=True)
    assert state.as_query() == {
        "service": "Plumbing", "sort": "rating", "min_rating": "4",
        "tiers": "pro,enterprise", "has_licenses": "true",
    }
    assert FilterState().as_query() == {}
