from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from easygestion.common.validators import (
    clean_text,
    parse_bool,
    parse_int_in_range,
    parse_iso_date,
    parse_iso_datetime,
    parse_money,
    parse_percentage,
    require_email,
    require_strong_password,
)
from easygestion.core.exceptions import ValidationError


def test_parse_money_quantizes_to_cents():
    assert parse_money("12.345", "amount") == Decimal("12.35")
    assert parse_money(7, "amount") == Decimal("7.00")


@pytest.mark.parametrize("value", [None, "", "abc", "-1", True, "NaN"])
def test_parse_money_rejects_bad_input(value):
    with pytest.raises(ValidationError) as exc:
        parse_money(value, "amount")
    assert exc.value.errors[0]["field"] == "amount"


def test_parse_percentage_bounds():
    assert parse_percentage("0", "pct") == Decimal("0.00")
    assert parse_percentage("100", "pct") == Decimal("100.00")
    with pytest.raises(ValidationError):
        parse_percentage("100.5", "pct")


def test_strong_password_policy():
    assert require_strong_password("Abcdefghijk1!x", 14) == "Abcdefghijk1!x"
    with pytest.raises(ValidationError):
        require_strong_password("Short1!a", 14)
    with pytest.raises(ValidationError):
        require_strong_password("abcdefghijklmn1!", 14)  # no uppercase
    with pytest.raises(ValidationError):
        require_strong_password("Abcdefghijklmnop1", 14)  # no special character


def test_require_email_lowercases_and_validates():
    assert require_email("  Jane@Example.COM ") == "jane@example.com"
    with pytest.raises(ValidationError):
        require_email("not-an-email")


def test_clean_text_escapes_html_and_blanks_to_none():
    assert clean_text("<b>hi</b>") == "&lt;b&gt;hi&lt;/b&gt;"
    assert clean_text("   ") is None
    assert clean_text(None) is None


def test_parse_iso_date_accepts_timestamps():
    assert parse_iso_date("2025-03-01", "d") == date(2025, 3, 1)
    assert parse_iso_date("2025-03-01T10:00:00Z", "d") == date(2025, 3, 1)
    assert parse_iso_date("2025-03-01T23:30:00-05:00", "d") == date(2025, 3, 1)


@pytest.mark.parametrize("raw", ["01/03/2025", "2025-03-01garbage", "2025-02-30", "2025-03-01T25:00"])
def test_parse_iso_date_rejects_malformed_input(raw):
    with pytest.raises(ValidationError):
        parse_iso_date(raw, "d")


def test_parse_iso_datetime_converts_offsets_to_local_time():
    expected = datetime(2025, 3, 1, 10, 30, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert parse_iso_datetime("2025-03-01T10:30:00Z", "d") == expected
    assert parse_iso_datetime("2025-03-01T12:30:00+02:00", "d") == expected
    assert parse_iso_datetime("2025-03-01T10:30:00", "d") == datetime(2025, 3, 1, 10, 30)
    with pytest.raises(ValidationError):
        parse_iso_datetime("yesterday", "d")


def test_parse_int_in_range():
    assert parse_int_in_range("12", "month", min_value=1, max_value=12) == 12
    with pytest.raises(ValidationError):
        parse_int_in_range("13", "month", min_value=1, max_value=12)
    with pytest.raises(ValidationError):
        parse_int_in_range("x", "month")


def test_parse_bool():
    assert parse_bool("true", "f") is True
    assert parse_bool("0", "f") is False
    with pytest.raises(ValidationError):
        parse_bool("maybe", "f")
