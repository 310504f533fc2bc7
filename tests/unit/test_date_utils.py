"""Unit tests for date helpers"""

import pytest
from datetime import date
from customer_rewards.utils.date_utils import month_name, parse_iso_date


def test_parse_iso_date_calendar_date():
    assert parse_iso_date("2024-04-15") == date(2024, 4, 15)


@pytest.mark.parametrize("value", [None, ""])
def test_parse_iso_date_missing(value):
    assert parse_iso_date(value) is None


@pytest.mark.parametrize("value", ["2024-W01-1", "20240101", "2024-1-011", "2024-02-30", "15/04/2024"])
def test_parse_iso_date_rejects_other_forms(value):
    """Test only YYYY-MM-DD calendar dates are accepted"""
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_month_name():
    assert month_name(date(2024, 3, 1)) == "MARCH"
