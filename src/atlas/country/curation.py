"""Catalogue curation: adding countries and their sights."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from atlas.country.country import Country
from atlas.domain import atlas


@atlas.command(part_of="Country")
class AddCountry:
    name: Text(required=True)  # JSON: [{"language": ..., "value": ...}]
    capital: Text(required=True)
    description: Text(required=True)
    photo_url: String(required=True, max_length=500)
    video_url: String(required=True, max_length=500)
    timezone: String(max_length=64)
    currency: String(max_length=3)
    latitude: Float()
    longitude: Float()
    alpha2_code: String(max_length=2)


@atlas.command(part_of="Country")
class AddSight:
    country_id: Identifier(required=True)
    name: Text(required=True)
    description: Text(required=True)
    photo_url: String(required=True, max_length=500)


@atlas.command_handler(part_of=Country)
class CurateCatalogueHandler:
    @handle(AddCountry)
    def add_country(self, command):
        country = Country.create(
            name=json.loads(command.name),
            capital=json.loads(command.capital),
            description=json.loads(command.description),
            photo_url=command.photo_url,
            video_url=command.video_url,
            timezone=command.timezone,
            currency=command.currency,
            latitude=command.latitude,
            longitude=command.longitude,
            alpha2_code=command.alpha2_code,
        )
        current_domain.repository_for(Country).add(country)
        return str(country.id)

    @handle(AddSight)
    def add_sight(self, command):
        repo = current_domain.repository_for(Country)
        country = repo.get_country(command.country_id)
        sight = country.add_sight(
            name=json.loads(command.name),
            description=json.loads(command.description),
            photo_url=command.photo_url,
        )
        repo.add(country)
        return str(sight.id)
