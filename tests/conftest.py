"""
Shared pytest fixtures.

Points the client at a fixed upstream base URL and provides sample
upstream payloads.
"""

import pytest

from app.core.config import settings


TEST_API_BASE = "https://holidays.test/api/v3"


@pytest.fixture(autouse=True)
def upstream_base(monkeypatch):
    """Use a fixed upstream base URL for every test."""
    monkeypatch.setattr(settings, "API_BASE", TEST_API_BASE)
    monkeypatch.setattr(settings, "UPSTREAM_TIMEOUT", None)
    return TEST_API_BASE


@pytest.fixture
def short_response():
    """Minimal upstream payload with only the displayed fields."""
    return [
        {
            "name": "Easter",
            "localName": "Pascha",
            "date": "31 March",
        },
    ]


@pytest.fixture
def next_holidays_response():
    """Full upstream payload as returned by /NextPublicHolidays/NL."""
    return [
        {
            "counties": None,
            "countryCode": "NL",
            "date": "2024-04-27",
            "fixed": False,
            "global": True,
            "launchYear": None,
            "localName": "Koningsdag",
            "name": "King's Day",
            "types": ["Public"],
        },
        {
            "counties": None,
            "countryCode": "NL",
            "date": "2024-05-09",
            "fixed": False,
            "global": True,
            "launchYear": None,
            "localName": "Hemelvaartsdag",
            "name": "Ascension Day",
            "types": ["Public"],
        },
        {
            "counties": None,
            "countryCode": "NL",
            "date": "2024-12-25",
            "fixed": False,
            "global": True,
            "launchYear": None,
            "localName": "Eerste Kerstdag",
            "name": "Christmas Day",
            "types": ["Public"],
        },
    ]
