import json

import pytest
from unittest.mock import patch

from app import cli
from app.schemas.public_holiday import ShortPublicHoliday


SERVICE = "app.services.public_holidays_service"


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("app.cli.setup_logging"):
        yield


def test_list_prints_json(capsys):
    holidays = [ShortPublicHoliday(name="King's Day", localName="Koningsdag", date="2024-04-27")]
    with patch(f"{SERVICE}.get_list_of_public_holidays", return_value=holidays) as mock_get:
        exit_code = cli.main(["list", "--year", "2024", "--country", "NL"])

    assert exit_code == 0
    mock_get.assert_called_once_with(2024, "NL")
    assert json.loads(capsys.readouterr().out) == [
        {"name": "King's Day", "localName": "Koningsdag", "date": "2024-04-27"}
    ]


def test_today_prints_flag(capsys):
    with patch(f"{SERVICE}.check_if_today_is_public_holiday", return_value=False):
        exit_code = cli.main(["today"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"country": "NL", "isPublicHoliday": False}


def test_next_uses_default_country(capsys):
    with patch(f"{SERVICE}.get_next_public_holidays", return_value=[]) as mock_get:
        exit_code = cli.main(["next"])

    assert exit_code == 0
    mock_get.assert_called_once_with("NL")
    assert json.loads(capsys.readouterr().out) == []


def test_invalid_input_exits_2(capsys):
    exit_code = cli.main(["next", "--country", "PL"])

    assert exit_code == 2
    assert capsys.readouterr().out == ""


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
