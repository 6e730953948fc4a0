"""Country aggregate root with the embedded Sight entity and UserRating value object."""

import json
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from atlas.domain import atlas
from atlas.errors import SightNotFound
from atlas.shared.localization import DEFAULT_LANGUAGE, LocalizedText


@atlas.value_object(part_of="Country")
class UserRating:
    """A single user's 1-5 star rating of a sight."""

    user_id: Identifier(required=True)
    rating: Integer(required=True)

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and (self.rating < 1 or self.rating > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    def to_dict(self):
        return {"user_id": str(self.user_id), "rating": self.rating}


@atlas.entity(part_of="Country")
class Sight:
    """A point of interest inside a country."""

    name: ValueObject(LocalizedText, required=True)
    description: ValueObject(LocalizedText, required=True)
    photo_url: String(required=True, max_length=500)
    ratings: Text()  # JSON: [{"user_id": ..., "rating": n}]

    def rating_list(self):
        return json.loads(self.ratings) if self.ratings else []


@atlas.aggregate
class Country:
    """A country in the catalogue together with the sights it owns."""

    name: ValueObject(LocalizedText, required=True)
    capital: ValueObject(LocalizedText, required=True)
    description: ValueObject(LocalizedText, required=True)
    photo_url: String(required=True, max_length=500)
    video_url: String(required=True, max_length=500)
    timezone: String(max_length=64)
    currency: String(max_length=3)
    latitude: Float(min_value=-90.0, max_value=90.0)
    longitude: Float(min_value=-180.0, max_value=180.0)
    alpha2_code: String(max_length=2)
    sights: HasMany(Sight)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(
        cls,
        name,
        capital,
        description,
        photo_url,
        video_url,
        timezone=None,
        currency=None,
        latitude=None,
        longitude=None,
        alpha2_code=None,
    ):
        from atlas.country.events import CountryAdded

        now = datetime.now()
        country = cls(
            name=LocalizedText.of(name),
            capital=LocalizedText.of(capital),
            description=LocalizedText.of(description),
            photo_url=photo_url,
            video_url=video_url,
            timezone=timezone,
            currency=currency,
            latitude=latitude,
            longitude=longitude,
            alpha2_code=alpha2_code.upper() if alpha2_code else None,
            created_at=now,
            updated_at=now,
        )
        country.raise_(
            CountryAdded(
                country_id=country.id,
                name=country.display_name(),
                alpha2_code=country.alpha2_code,
                added_at=now,
            )
        )
        return country

    def display_name(self):
        if self.name.has(DEFAULT_LANGUAGE):
            return self.name.resolve(DEFAULT_LANGUAGE)
        return self.name.as_list()[0]["value"]

    def find_sight(self, sight_id):
        sight = next((s for s in self.sights if str(s.id) == str(sight_id)), None)
        if sight is None:
            raise SightNotFound(self.id, sight_id)
        return sight

    def add_sight(self, name, description, photo_url):
        from atlas.country.events import SightAdded

        sight = Sight(
            name=LocalizedText.of(name),
            description=LocalizedText.of(description),
            photo_url=photo_url,
            ratings=json.dumps([]),
        )
        self.add_sights(sight)
        self.updated_at = datetime.now()

        self.raise_(
            SightAdded(
                country_id=self.id,
                sight_id=sight.id,
                name=sight.name.as_list()[0]["value"],
            )
        )
        return sight

    def rate_sight(self, sight_id, user_id, rating):
        """Record ``user_id``'s rating of a sight, replacing any earlier one.

        Returns True when the stored ratings changed. Re-submitting the rating a
        user already gave leaves the aggregate untouched.
        """
        from atlas.country.events import SightRated

        new_rating = UserRating(user_id=user_id, rating=rating)
        sight = self.find_sight(sight_id)

        ratings = sight.rating_list()
        existing = next((r for r in ratings if str(r["user_id"]) == str(user_id)), None)

        if existing is not None and existing["rating"] == new_rating.rating:
            return False

        previous_rating = None
        if existing is None:
            ratings.append(new_rating.to_dict())
        else:
            previous_rating = existing["rating"]
            existing["rating"] = new_rating.rating

        sight.ratings = json.dumps(ratings)
        now = datetime.now()
        self.updated_at = now

        self.raise_(
            SightRated(
                country_id=self.id,
                sight_id=sight.id,
                user_id=user_id,
                rating=new_rating.rating,
                previous_rating=previous_rating,
                rated_at=now,
            )
        )
        return True

    def ratings_by_sight(self):
        """Every sight's id with its raw rating list."""
        return [{"id": str(sight.id), "ratings": sight.rating_list()} for sight in self.sights]
