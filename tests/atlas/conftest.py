import json
import os

import pytest


@pytest.fixture(scope="session")
def _atlas_domain(request):
    """Initialize the atlas domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from atlas.domain import atlas

    atlas.init()
    return atlas


@pytest.fixture(scope="session", autouse=True)
def setup_db(_atlas_domain):
    from shared.db import drop_db, setup_db

    setup_db(_atlas_domain)

    yield

    drop_db(_atlas_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_atlas_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _atlas_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


def _localized(en=None, ru=None, de=None):
    """Build a list of {language, value} pairs, skipping missing languages."""
    values = {"en": en, "ru": ru, "de": de}
    return [{"language": lang, "value": value} for lang, value in values.items() if value is not None]


@pytest.fixture()
def localized():
    return _localized


@pytest.fixture()
def add_country():
    """Add a country through the AddCountry command and return its id."""
    from atlas.country.curation import AddCountry
    from protean.utils.globals import current_domain

    def _add(
        name=None,
        capital=None,
        description=None,
        timezone="Europe/Rome",
        currency="EUR",
        **overrides,
    ):
        command = AddCountry(
            name=json.dumps(name or _localized(en="Italy", ru="Италия", de="Italien")),
            capital=json.dumps(capital or _localized(en="Rome", ru="Рим", de="Rom")),
            description=json.dumps(
                description or _localized(en="Peninsula", ru="Полуостров", de="Halbinsel")
            ),
            photo_url=overrides.pop("photo_url", "/assets/italy.jpg"),
            video_url=overrides.pop("video_url", "https://video.example.com/italy"),
            timezone=timezone,
            currency=currency,
            **overrides,
        )
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture()
def add_sight():
    """Add a sight to a country through the AddSight command and return its id."""
    from atlas.country.curation import AddSight
    from protean.utils.globals import current_domain

    def _add(country_id, name=None, description=None, photo_url="/assets/sight.jpg"):
        command = AddSight(
            country_id=country_id,
            name=json.dumps(name or _localized(en="Colosseum", ru="Колизей", de="Kolosseum")),
            description=json.dumps(
                description or _localized(en="Amphitheatre", ru="Амфитеатр", de="Amphitheater")
            ),
            photo_url=photo_url,
        )
        return current_domain.process(command, asynchronous=False)

    return _add
