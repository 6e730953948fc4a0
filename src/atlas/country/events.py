"""Domain events for the Country aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from atlas.domain import atlas


@atlas.event(part_of="Country")
class CountryAdded:
    """A country was added to the catalogue."""

    __version__ = 1

    country_id: Identifier(required=True)
    name: String(required=True)
    alpha2_code: String()
    added_at: DateTime(required=True)


@atlas.event(part_of="Country")
class SightAdded:
    """A sight was added to a country."""

    __version__ = 1

    country_id: Identifier(required=True)
    sight_id: Identifier(required=True)
    name: String(required=True)


@atlas.event(part_of="Country")
class SightRated:
    """A user rated a sight for the first time or changed an earlier rating."""

    __version__ = 1

    country_id: Identifier(required=True)
    sight_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True)
    previous_rating: Integer()
    rated_at: DateTime(required=True)
