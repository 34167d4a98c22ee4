from datetime import time, timedelta

import pytest

from src.pharmacy_payroll.pharmacy_payroll.common.datetime_utils import format_time_of_day, parse_time_of_day
from src.pharmacy_payroll.pharmacy_payroll.common.formatting import format_krw, format_worked_minutes


@pytest.mark.parametrize(
    "value, expected",
    [
        ("09:00", 540),
        ("9:05", 545),
        ("18:30:59", 1110),
        (" 00:00 ", 0),
        ("23:59", 1439),
        (time(8, 15, 30), 495),
        (timedelta(hours=17, minutes=45), 1065),
    ],
)
def test_parse_time_of_day_accepts_supported_forms(value, expected):
    assert parse_time_of_day(value) == expected


@pytest.mark.parametrize(
    "value",
    ["bad", "", "24:00", "12:60", "12:30:60", "12", "12:3", "ab:cd", "12:30:00:00", "-1:00", None, 930, timedelta(days=1)],
)
def test_parse_time_of_day_rejects_everything_else(value):
    assert parse_time_of_day(value) is None


def test_format_time_of_day_pads():
    assert format_time_of_day(545) == "09:05"


def test_display_helpers_round_only_for_presentation():
    assert format_krw(77359.9999) == "77,360원"
    assert format_worked_minutes(485) == "8시간 5분"


@pytest.mark.parametrize("amount, expected", [(2.5, "3원"), (4930.5, "4,931원"), (4930.49, "4,930원"), (0, "0원")])
def test_format_krw_rounds_halves_up(amount, expected):
    assert format_krw(amount) == expected
