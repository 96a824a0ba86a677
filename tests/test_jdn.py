from datetime import date

import pytest

from ethiopian_calendar.api.errors import CalendarError, RangeError
from ethiopian_calendar.api.jdn import (
    MAX_DATE_JDN,
    MIN_DATE_JDN,
    date_to_jdn,
    gregorian_to_jdn,
    is_gregorian_leap,
    jdn_to_date,
    jdn_to_gregorian,
)


@pytest.mark.parametrize(
    "triple,jdn",
    [
        ((2000, 1, 1), 2451545),
        ((2024, 1, 1), 2460311),
        ((1858, 11, 17), 2400001),
        ((-4713, 11, 24), 0),
        ((8, 8, 26), 1724220),
    ],
)
def test_known_julian_day_numbers(triple, jdn):
    assert gregorian_to_jdn(*triple) == jdn
    assert jdn_to_gregorian(jdn) == triple


def test_jdn_matches_host_ordinals():
    for value in (date(1, 1, 1), date(1582, 10, 15), date(2024, 2, 29), date(9999, 12, 31)):
        assert date_to_jdn(value) - value.toordinal() == 1721425
        assert jdn_to_date(date_to_jdn(value)) == value


def test_gregorian_roundtrip_over_common_era():
    for year in range(1, 10000):
        february = 29 if is_gregorian_leap(year) else 28
        for month, last in enumerate((31, february, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31), 1):
            for day in (1, 28, last):
                assert jdn_to_gregorian(gregorian_to_jdn(year, month, day)) == (year, month, day)


def test_consecutive_jdns_are_consecutive_days():
    previous = jdn_to_date(2299161)
    for jdn in range(2299162, 2299162 + 3000):
        current = jdn_to_date(jdn)
        assert (current - previous).days == 1
        previous = current


def test_invalid_gregorian_triple_is_not_rejected():
    assert gregorian_to_jdn(2024, 1, 40) == gregorian_to_jdn(2024, 2, 9)


def test_is_gregorian_leap():
    assert is_gregorian_leap(2000)
    assert is_gregorian_leap(2024)
    assert not is_gregorian_leap(1900)
    assert not is_gregorian_leap(2023)


def test_host_date_bounds():
    assert MIN_DATE_JDN == 1721426
    assert MAX_DATE_JDN == 5373484


@pytest.mark.parametrize("jdn", [MIN_DATE_JDN - 1, MAX_DATE_JDN + 1, 0])
def test_jdn_outside_host_range_raises_range_error(jdn):
    with pytest.raises(RangeError) as excinfo:
        jdn_to_date(jdn)
    assert isinstance(excinfo.value, CalendarError)
    assert excinfo.value.jdn == jdn
    assert (excinfo.value.minimum, excinfo.value.maximum) == (MIN_DATE_JDN, MAX_DATE_JDN)
    assert str(MAX_DATE_JDN) in str(excinfo.value)
