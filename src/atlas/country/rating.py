"""Sight rating command and handler.

The whole Country is loaded, the sight's rating list is updated in memory and
the Country is written back. Concurrent ratings of the same country are not
serialized: the later write wins.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from atlas.country.country import Country
from atlas.domain import atlas, logger


@atlas.command(part_of="Country")
class RateSight:
    country_id: Identifier(required=True)
    sight_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True, min_value=1, max_value=5)


@atlas.command_handler(part_of=Country)
class RateSightHandler:
    @handle(RateSight)
    def rate_sight(self, command):
        repo = current_domain.repository_for(Country)
        country = repo.get_country(command.country_id)

        changed = country.rate_sight(command.sight_id, command.user_id, command.rating)
        if changed:
            repo.add(country)

        logger.info(
            "sight_rated",
            country_id=str(command.country_id),
            sight_id=str(command.sight_id),
            user_id=str(command.user_id),
            rating=command.rating,
            changed=changed,
        )
        return {"id": str(country.id), "sights": country.ratings_by_sight()}
