"""FastAPI routes for the Atlas bounded context.

Every endpoint is a POST taking a JSON body, mirroring the contract the mobile
client was built against; successful calls answer 201.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from atlas.api.schemas import (
    CountryDetailRequest,
    CountryDetailResponse,
    CountryLookupRequest,
    CountryRatingsResponse,
    CountrySummaryResponse,
    CurrencyResponse,
    ListCountriesRequest,
    RateSightRequest,
    TimezoneResponse,
)
from atlas.country import catalog
from atlas.country.rating import RateSight
from atlas.shared.localization import DEFAULT_LANGUAGE
from shared.security import require_caller

country_router = APIRouter(prefix="/countries", tags=["countries"])


def _language(requested):
    return requested.value if requested is not None else DEFAULT_LANGUAGE


@country_router.post("", status_code=201, response_model=list[CountrySummaryResponse])
async def list_countries(body: ListCountriesRequest | None = None) -> list[CountrySummaryResponse]:
    """Short info about up to ``countriesNum`` countries."""
    body = body or ListCountriesRequest()
    summaries = catalog.list_summaries(
        body.countries_num or catalog.DEFAULT_COUNTRIES_NUM,
        _language(body.reload_lang),
    )
    return [CountrySummaryResponse(**summary) for summary in summaries]


@country_router.post("/detailed", status_code=201, response_model=CountryDetailResponse)
async def country_detailed(body: CountryDetailRequest):
    """Detailed info about one country with its sights.

    An unknown country answers an empty object, which clients read as "not found".
    """
    detail = catalog.get_detail(body.country_id, _language(body.reload_lang))
    if detail is None:
        return JSONResponse(status_code=201, content={})
    return CountryDetailResponse(**detail)


@country_router.post("/rating", status_code=201, response_model=CountryRatingsResponse)
async def rate_sight(body: RateSightRequest, caller_id: str = Depends(require_caller)) -> CountryRatingsResponse:
    """Set the caller's rating of a sight and return the ratings of every sight in the country."""
    if body.user_id != caller_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Users may only rate on their own behalf")

    command = RateSight(
        country_id=body.country_id,
        sight_id=body.sight_id,
        user_id=body.user_id,
        rating=body.rating,
    )
    result = current_domain.process(command, asynchronous=False)
    return CountryRatingsResponse(**result)


@country_router.post("/timezone", status_code=201, response_model=TimezoneResponse)
async def timezone(body: CountryLookupRequest) -> TimezoneResponse:
    return TimezoneResponse(timezone=catalog.get_timezone(body.country_id))


@country_router.post("/currency", status_code=201, response_model=CurrencyResponse)
async def currency(body: CountryLookupRequest) -> CurrencyResponse:
    return CurrencyResponse(currency=catalog.get_currency(body.country_id))
