"""Application tests for the RateSight command handler."""

import pytest
from atlas.country.country import Country
from atlas.country.rating import RateSight
from atlas.errors import CountryNotFound, SightNotFound
from protean import current_domain
from protean.exceptions import ValidationError


def _rate(country_id, sight_id, user_id="user-1", rating=4):
    return current_domain.process(
        RateSight(country_id=country_id, sight_id=sight_id, user_id=user_id, rating=rating),
        asynchronous=False,
    )


@pytest.fixture
def rated_country(add_country, add_sight):
    country_id = add_country()
    sight_id = add_sight(country_id)
    return country_id, sight_id


class TestRateSightCommand:
    def test_rating_persisted(self, rated_country):
        country_id, sight_id = rated_country
        _rate(country_id, sight_id, rating=4)

        country = current_domain.repository_for(Country).get(country_id)
        assert country.find_sight(sight_id).rating_list() == [{"user_id": "user-1", "rating": 4}]

    def test_returns_ratings_of_every_sight(self, rated_country, add_sight, localized):
        country_id, sight_id = rated_country
        other_id = add_sight(country_id, name=localized(en="Pantheon"), description=localized(en="Temple"))

        result = _rate(country_id, sight_id, rating=5)

        assert result["id"] == country_id
        by_sight = {entry["id"]: entry["ratings"] for entry in result["sights"]}
        assert by_sight == {
            sight_id: [{"user_id": "user-1", "rating": 5}],
            other_id: [],
        }

    def test_second_rating_replaces_first(self, rated_country):
        country_id, sight_id = rated_country
        _rate(country_id, sight_id, rating=3)
        result = _rate(country_id, sight_id, rating=5)

        ratings = result["sights"][0]["ratings"]
        assert ratings == [{"user_id": "user-1", "rating": 5}]

        country = current_domain.repository_for(Country).get(country_id)
        assert country.find_sight(sight_id).rating_list() == [{"user_id": "user-1", "rating": 5}]

    def test_same_rating_again_leaves_store_untouched(self, rated_country):
        country_id, sight_id = rated_country
        _rate(country_id, sight_id, rating=4)
        before = current_domain.repository_for(Country).get(country_id).updated_at

        result = _rate(country_id, sight_id, rating=4)

        after = current_domain.repository_for(Country).get(country_id).updated_at
        assert after == before
        assert result["sights"][0]["ratings"] == [{"user_id": "user-1", "rating": 4}]

    def test_ratings_from_two_users(self, rated_country):
        country_id, sight_id = rated_country
        _rate(country_id, sight_id, user_id="user-1", rating=2)
        result = _rate(country_id, sight_id, user_id="user-2", rating=5)

        assert result["sights"][0]["ratings"] == [
            {"user_id": "user-1", "rating": 2},
            {"user_id": "user-2", "rating": 5},
        ]


class TestRateSightRejected:
    def test_unknown_country(self):
        with pytest.raises(CountryNotFound):
            _rate("missing-country", "missing-sight")

    def test_unknown_sight(self, rated_country):
        country_id, _ = rated_country
        with pytest.raises(SightNotFound):
            _rate(country_id, "missing-sight")

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rated_country, rating):
        country_id, sight_id = rated_country
        with pytest.raises(ValidationError):
            _rate(country_id, sight_id, rating=rating)

        country = current_domain.repository_for(Country).get(country_id)
        assert country.find_sight(sight_id).rating_list() == []
