"""Populating the catalogue from JSON records.

Each record mirrors the AddCountry command, with an optional ``sights`` list of
AddSight payloads::

    {
        "name": [{"language": "en", "value": "Italy"}, ...],
        "capital": [...],
        "description": [...],
        "photo_url": "...",
        "video_url": "...",
        "timezone": "Europe/Rome",
        "currency": "EUR",
        "sights": [{"name": [...], "description": [...], "photo_url": "..."}]
    }
"""

import json
from pathlib import Path

from protean.utils.globals import current_domain

from atlas.country.country import Country
from atlas.country.curation import AddCountry, AddSight
from atlas.domain import logger


def seed_catalogue(records):
    """Add every record as a country with its sights; returns the new country ids."""
    country_ids = []
    for record in records:
        country_id = current_domain.process(
            AddCountry(
                name=json.dumps(record["name"], ensure_ascii=False),
                capital=json.dumps(record["capital"], ensure_ascii=False),
                description=json.dumps(record["description"], ensure_ascii=False),
                photo_url=record["photo_url"],
                video_url=record["video_url"],
                timezone=record.get("timezone"),
                currency=record.get("currency"),
                latitude=record.get("latitude"),
                longitude=record.get("longitude"),
                alpha2_code=record.get("alpha2_code"),
            ),
            asynchronous=False,
        )
        for sight in record.get("sights", []):
            current_domain.process(
                AddSight(
                    country_id=country_id,
                    name=json.dumps(sight["name"], ensure_ascii=False),
                    description=json.dumps(sight["description"], ensure_ascii=False),
                    photo_url=sight["photo_url"],
                ),
                asynchronous=False,
            )
        country_ids.append(country_id)

    logger.info("catalogue_seeded", countries=len(country_ids))
    return country_ids


def seed_from_file(path):
    with Path(path).open(encoding="utf-8") as handle:
        return seed_catalogue(json.load(handle))


def seed_if_empty(path):
    """Seed from ``path`` only when the catalogue holds no countries yet.

    Returns the new country ids, or an empty list when seeding was skipped.
    """
    repo = current_domain.repository_for(Country)
    if next(repo.scan(batch_size=1), None) is not None:
        logger.info("catalogue_seed_skipped", path=str(path))
        return []
    return seed_from_file(path)
