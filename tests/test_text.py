import pytest

from ethiopian_calendar.api.errors import FormatError, ValidationError
from ethiopian_calendar.api.ethiopian import EthiopianDate
from ethiopian_calendar.api.text import format_ethiopian_date_text, parse_ethiopian_date_text


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2016-04-23", EthiopianDate(2016, 4, 23)),
        (" 2016-01-01 ", EthiopianDate(2016, 1, 1)),
        ("2016-4-3", EthiopianDate(2016, 4, 3)),
        ("15-01-01", EthiopianDate(15, 1, 1)),
        ("2015-13-06", EthiopianDate(2015, 13, 6)),
    ],
)
def test_parse_valid_text(text, expected):
    assert parse_ethiopian_date_text(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "23-04-2016",
        "2016/04/23",
        "2016-04",
        "2016-04-23-01",
        "-2016-04-23",
        "2016-ab-01",
        "2016-+4-01",
        "2016-004-01",
        "2016-04-",
    ],
)
def test_parse_rejects_malformed_text(text):
    with pytest.raises(FormatError) as excinfo:
        parse_ethiopian_date_text(text)
    assert excinfo.value.text == text
    assert repr(text) in str(excinfo.value)


def test_parse_rejects_non_string():
    with pytest.raises(FormatError):
        parse_ethiopian_date_text(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "text,field",
    [
        ("2016-14-01", "month"),
        ("0000-01-01", "year"),
        ("2016-13-06", "day"),
        ("2016-02-31", "day"),
        ("2016-02-00", "day"),
    ],
)
def test_parse_delegates_range_checks(text, field):
    with pytest.raises(ValidationError) as excinfo:
        parse_ethiopian_date_text(text)
    assert excinfo.value.field == field


def test_format_pads_fields():
    assert format_ethiopian_date_text(2016, 4, 3) == "2016-04-03"
    assert format_ethiopian_date_text(15, 13, 6) == "0015-13-06"


@pytest.mark.parametrize("text", ["2016-04-23", "0001-01-01", "2015-13-06", "12345-12-30"])
def test_format_of_parse_is_identity_for_canonical_text(text):
    parsed = parse_ethiopian_date_text(text)
    assert format_ethiopian_date_text(parsed.year, parsed.month, parsed.day) == text


def test_parse_rejects_year_too_long_for_an_integer():
    text = "9" * 5000 + "-01-01"
    with pytest.raises(FormatError) as excinfo:
        parse_ethiopian_date_text(text)
    assert excinfo.value.text == text
    assert "5000" in excinfo.value.reason
