"""Shared BDD fixtures and step definitions for the Atlas domain."""

import pytest
from atlas.country.country import Country
from atlas.country.events import SightRated
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a country "{country_name}" with a sight "{sight_name}"'),
    target_fixture="country",
)
def country_with_sight(country_name, sight_name):
    country = Country.create(
        name=[{"language": "en", "value": country_name}],
        capital=[{"language": "en", "value": f"Capital of {country_name}"}],
        description=[{"language": "en", "value": f"About {country_name}"}],
        photo_url="/assets/country.jpg",
        video_url="https://video.example.com/country",
    )
    country.add_sight(
        name=[{"language": "en", "value": sight_name}],
        description=[{"language": "en", "value": f"About {sight_name}"}],
        photo_url="/assets/sight.jpg",
    )
    country._events.clear()
    return country


@given(parsers.cfparse('user "{user_id}" has rated the sight {rating:d}'))
def existing_rating(country, user_id, rating):
    country.rate_sight(country.sights[0].id, user_id, rating)
    country._events.clear()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the sight has {count:d} rating"))
@then(parsers.cfparse("the sight has {count:d} ratings"))
def sight_rating_count(country, count):
    assert len(country.sights[0].rating_list()) == count


@then(parsers.cfparse('user "{user_id}" has rated the sight {rating:d}'))
def user_rating_is(country, user_id, rating):
    ratings = {entry["user_id"]: entry["rating"] for entry in country.sights[0].rating_list()}
    assert ratings[user_id] == rating


@then("a SightRated event is raised")
def sight_rated_raised(country):
    assert any(isinstance(event, SightRated) for event in country._events)


@then("no event is raised")
def no_event_raised(country):
    assert country._events == []


@then(parsers.cfparse('the rating is rejected with "{message}"'))
def rating_rejected(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])
