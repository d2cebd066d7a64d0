from fastapi import APIRouter, Query
from typing import List

from app.core.config import SUPPORTED_COUNTRY, SUPPORTED_YEAR
from app.schemas.public_holiday import (
    ShortPublicHoliday,
    TodayPublicHolidayResponse,
    ErrorResponse
)
from app.services import public_holidays_service

router = APIRouter(
    prefix="/public-holidays",
    tags=["Public Holidays"],
    responses={
        400: {"model": ErrorResponse, "description": "Unsupported country or year"},
        500: {"model": ErrorResponse, "description": "Internal server error"}
    }
)


@router.get(
    "",
    response_model=List[ShortPublicHoliday],
    summary="List public holidays",
    description="Public holidays for a year and country, trimmed to name, local name and date",
)
def list_public_holidays(
    year: int = Query(SUPPORTED_YEAR, description="Year to list holidays for"),
    country: str = Query(SUPPORTED_COUNTRY, description="ISO 3166-1 alpha-2 country code"),
):
    """
    An unsupported year or country is rejected with 400. An upstream
    failure yields an empty list.
    """
    return public_holidays_service.get_list_of_public_holidays(year, country)


@router.get(
    "/today",
    response_model=TodayPublicHolidayResponse,
    summary="Is today a public holiday",
)
def is_today_public_holiday(
    country: str = Query(SUPPORTED_COUNTRY, description="ISO 3166-1 alpha-2 country code"),
):
    return TodayPublicHolidayResponse(
        country=country,
        isPublicHoliday=public_holidays_service.check_if_today_is_public_holiday(country),
    )


@router.get(
    "/next",
    response_model=List[ShortPublicHoliday],
    summary="List upcoming public holidays",
)
def list_next_public_holidays(
    country: str = Query(SUPPORTED_COUNTRY, description="ISO 3166-1 alpha-2 country code"),
):
    return public_holidays_service.get_next_public_holidays(country)
