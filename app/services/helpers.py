from typing import Any, Mapping, Optional, Union

from app.core.config import SUPPORTED_COUNTRY, SUPPORTED_YEAR
from app.schemas.public_holiday import PublicHoliday, RequestFilter, ShortPublicHoliday


class InvalidInputError(ValueError):
    """Raised when a caller asks for a country or year that is not supported."""

    pass


def validate_input(
    country: Optional[str] = None,
    year: Optional[int] = None,
    request_filter: Optional[RequestFilter] = None,
) -> bool:
    """
    Check optional country/year filters against the supported values.

    Args:
        country: Country code, skipped when None
        year: Year, skipped when None
        request_filter: Alternative to passing country/year separately

    Returns:
        True when every provided value is supported

    Raises:
        InvalidInputError: Country or year is not supported (country is checked first)
    """
    if request_filter is not None:
        country = request_filter.country
        year = request_filter.year

    if country is not None and country != SUPPORTED_COUNTRY:
        raise InvalidInputError(f"Country provided is not supported, received: {country}")

    if year is not None and year != SUPPORTED_YEAR:
        raise InvalidInputError(f"Year provided not the current, received: {year}")

    return True


def shorten_public_holiday(
    holiday: Union[PublicHoliday, Mapping[str, Any]]
) -> ShortPublicHoliday:
    """Keep only name, localName and date from a holiday record."""
    if isinstance(holiday, PublicHoliday):
        return ShortPublicHoliday(
            name=holiday.name,
            localName=holiday.localName,
            date=holiday.date,
        )

    return ShortPublicHoliday(
        name=holiday["name"],
        localName=holiday["localName"],
        date=holiday["date"],
    )
