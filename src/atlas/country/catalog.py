"""Read side of the catalogue, projecting countries into one display language.

Localized fields are resolved per request; a stored field without a value in the
requested language raises MissingLocalization rather than falling back.
"""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from atlas.country.country import Country
from atlas.errors import CountryNotFound

DEFAULT_COUNTRIES_NUM = 8


def _summary(country, language):
    return {
        "id": str(country.id),
        "name": country.name.resolve(language, field="country.name"),
        "capital": country.capital.resolve(language, field="country.capital"),
        "currency": country.currency,
        "timezone": country.timezone,
        "photo_url": country.photo_url,
    }


def _sight_detail(sight, language):
    return {
        "id": str(sight.id),
        "name": sight.name.resolve(language, field="sight.name"),
        "description": sight.description.resolve(language, field="sight.description"),
        "photo_url": sight.photo_url,
        "ratings": sight.rating_list(),
    }


def list_summaries(limit, language):
    """Up to ``limit`` countries named in ``language``, in store order."""
    if not isinstance(limit, int) or limit < 1:
        raise ValidationError({"limit": ["Number of countries must be a positive integer"]})

    repo = current_domain.repository_for(Country)
    summaries = []
    for country in repo.scan():
        if not country.name.has(language):
            continue
        summaries.append(_summary(country, language))
        if len(summaries) >= limit:
            break
    return summaries


def get_detail(country_id, language):
    """Full view of one country and its sights, or None when there is nothing to show.

    A country that exists but has no name in ``language`` is treated as absent.
    """
    try:
        country = current_domain.repository_for(Country).get_country(country_id)
    except CountryNotFound:
        return None

    if not country.name.has(language):
        return None

    detail = _summary(country, language)
    detail.update(
        description=country.description.resolve(language, field="country.description"),
        video_url=country.video_url,
        sights=[_sight_detail(sight, language) for sight in country.sights],
    )
    return detail


def get_timezone(country_id):
    return current_domain.repository_for(Country).get_country(country_id).timezone


def get_currency(country_id):
    return current_domain.repository_for(Country).get_country(country_id).currency
