"""Repository for the Country aggregate."""

from protean.exceptions import ObjectNotFoundError

from atlas.country.country import Country
from atlas.domain import atlas
from atlas.errors import CountryNotFound


@atlas.repository(part_of=Country)
class CountryRepository:
    def get_country(self, country_id) -> Country:
        """Load a country with its sights, raising CountryNotFound for unknown ids."""
        try:
            return self.get(country_id)
        except ObjectNotFoundError:
            raise CountryNotFound(country_id) from None

    def scan(self, batch_size: int = 100):
        """Yield every stored country in store order, fetching in batches."""
        offset = 0
        while True:
            items = self._dao.query.offset(offset).limit(batch_size).all().items
            yield from items
            if len(items) < batch_size:
                return
            offset += batch_size
