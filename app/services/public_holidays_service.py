"""
Client for the upstream public holidays API.

Each operation validates its input, performs one GET against the
upstream API and trims the result. Validation errors propagate to the
caller; anything that goes wrong while calling upstream or reading its
response is logged and turned into an empty answer ([] or False).
"""

from typing import Any, List

import requests

from app.core.config import settings
from app.core.logging_config import get_logger
from app.schemas.public_holiday import ShortPublicHoliday
from app.services.helpers import shorten_public_holiday, validate_input

logger = get_logger(__name__)


def _build_url(*parts: Any) -> str:
    base = settings.API_BASE.rstrip("/")
    return "/".join([base, *(str(part) for part in parts)])


def _get(url: str) -> requests.Response:
    logger.debug("Calling upstream", extra={'url': url})
    return requests.get(url, timeout=settings.UPSTREAM_TIMEOUT)


def _fetch_short_holidays(url: str) -> List[ShortPublicHoliday]:
    response = _get(url)
    response.raise_for_status()

    data = response.json()
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of holidays, got {type(data).__name__}")

    return [shorten_public_holiday(holiday) for holiday in data]


def get_list_of_public_holidays(year: int, country: str) -> List[ShortPublicHoliday]:
    """
    Get all public holidays for a year and country.

    Raises:
        InvalidInputError: Year or country is not supported
    """
    validate_input(year=year, country=country)

    url = _build_url("PublicHolidays", year, country)
    try:
        return _fetch_short_holidays(url)
    except Exception as e:
        logger.warning(
            "Failed to fetch public holidays: %s", e,
            extra={'url': url, 'country': country, 'year': year}
        )
        return []


def check_if_today_is_public_holiday(country: str) -> bool:
    """
    Check whether today is a public holiday in the given country.

    Upstream answers 200 when it is and 204 when it is not. A failed
    call also returns False, so "not a holiday" and "could not tell"
    look the same to the caller.

    Raises:
        InvalidInputError: Country is not supported
    """
    validate_input(country=country)

    url = _build_url("IsTodayPublicHoliday", country)
    try:
        response = _get(url)
        return response.status_code == 200
    except Exception as e:
        logger.warning(
            "Failed to check today's holiday status: %s", e,
            extra={'url': url, 'country': country}
        )
        return False


def get_next_public_holidays(country: str) -> List[ShortPublicHoliday]:
    """
    Get upcoming public holidays for the next 365 days.

    Raises:
        InvalidInputError: Country is not supported
    """
    validate_input(country=country)

    url = _build_url("NextPublicHolidays", country)
    try:
        return _fetch_short_holidays(url)
    except Exception as e:
        logger.warning(
            "Failed to fetch next public holidays: %s", e,
            extra={'url': url, 'country': country}
        )
        return []
