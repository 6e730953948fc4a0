"""Pydantic request/response schemas for the Atlas API.

Wire names follow the mobile client's camelCase contract (``countryID``,
``reloadLang``, ``photoUrl``); Python attributes stay snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from atlas.shared.localization import Language

# --- Request Schemas ---


def _blank_as_default(value):
    # Clients send 0 or "" to mean "use the default".
    return None if value in (0, "") else value


class ListCountriesRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{"countriesNum": 8, "reloadLang": "ru"}]},
    }

    countries_num: int | None = Field(None, alias="countriesNum", ge=1)
    reload_lang: Language | None = Field(None, alias="reloadLang")

    @field_validator("countries_num", "reload_lang", mode="before")
    @classmethod
    def blank_means_default(cls, value):
        return _blank_as_default(value)


class CountryDetailRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [{"countryID": "a1b2c3d4-e5f6-7890-abcd-ef1234567890", "reloadLang": "de"}]
        },
    }

    country_id: str = Field(..., alias="countryID", min_length=1)
    reload_lang: Language | None = Field(None, alias="reloadLang")

    @field_validator("reload_lang", mode="before")
    @classmethod
    def blank_means_default(cls, value):
        return _blank_as_default(value)


class CountryLookupRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {"examples": [{"countryID": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]},
    }

    country_id: str = Field(..., alias="countryID", min_length=1)


class RateSightRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "countryID": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "sightID": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "userID": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    "rating": 4,
                }
            ]
        },
    }

    country_id: str = Field(..., alias="countryID", min_length=1)
    sight_id: str = Field(..., alias="sightID", min_length=1)
    user_id: str = Field(..., alias="userID", min_length=1)
    rating: int = Field(..., ge=1, le=5)


# --- Response Schemas ---


class _CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class CountrySummaryResponse(_CamelModel):
    id: str
    name: str
    capital: str
    currency: str | None = None
    timezone: str | None = None
    photo_url: str


class RatingEntry(_CamelModel):
    user_id: str
    rating: int


class SightDetailResponse(_CamelModel):
    id: str
    name: str
    description: str
    photo_url: str
    ratings: list[RatingEntry] = []


class CountryDetailResponse(CountrySummaryResponse):
    description: str
    video_url: str
    sights: list[SightDetailResponse] = []


class SightRatingsResponse(_CamelModel):
    id: str
    ratings: list[RatingEntry] = []


class CountryRatingsResponse(_CamelModel):
    id: str
    sights: list[SightRatingsResponse]


class TimezoneResponse(BaseModel):
    timezone: str | None = None


class CurrencyResponse(BaseModel):
    currency: str | None = None
