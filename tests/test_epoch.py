from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from suriyayart.core.epoch import BaseValues, compute_base_values
from suriyayart.core.validators import ValidationError


# (month, year_be, day, hour, minute) → (rjd, base minutes, corrected, mean)
BASE_VECTORS = [
    ((9, 2566, 15, 14, 45), (506036, 16748950, 8950, 8973)),
    ((1, 2500, 1, 0, 0), (481673, 15308178, 15378, 15401)),
    ((2, 2543, 29, 6, 30), (497437, 16240418, 18818, 18841)),
    ((12, 2567, 31, 23, 59), (506509, 16776944, 15344, 15367)),
    ((4, 2530, 10, 11, 59), (492729, 15962019, 21219, 21242)),
    ((7, 2480, 5, 3, 15), (474553, 14887137, 4737, 4760)),
    ((1, 1700, 1, 8, 5), (189479, -1971033, 16167, 16190)),
    ((3, 1500, 20, 18, 40), (116509, -6286173, 21027, 21050)),
    ((4, 2533, 14, 9, 30), (493829, 16027063, 21463, 21486)),
    ((11, 2600, 7, 12, 1), (518508, 17486488, 12088, 12111)),
    ((6, 2555, 25, 21, 10), (501937, 16506565, 4165, 4188)),
]


@pytest.mark.parametrize("args, expected", BASE_VECTORS)
def test_base_values_match_reference(args, expected):
    bv = compute_base_values(*args)
    rjd, base, corrected, mean = expected
    assert bv.relative_julian_day == rjd
    assert bv.solar_cycle_base_minutes == base
    assert bv.solar_longitude_corrected == corrected
    assert bv.solar_longitude_mean == mean


def test_time_of_day_hours():
    assert compute_base_values(9, 2566, 15, 14, 45).time_of_day_hours == 14.75
    assert compute_base_values(12, 2567, 31, 23, 59).time_of_day_hours == pytest.approx(23.983333333333334)
    assert compute_base_values(1, 1700, 1, 8, 5).time_of_day_hours == pytest.approx(8.083333333333334)


def test_base_values_is_a_frozen_value():
    bv = compute_base_values(9, 2566, 15, 14, 45)
    assert isinstance(bv, BaseValues)
    assert bv == compute_base_values(9, 2566, 15, 14, 45)
    assert bv.to_dict()["relative_julian_day"] == 506036
    with pytest.raises(Exception):
        bv.relative_julian_day = 0  # type: ignore[misc]


@pytest.mark.parametrize("month, year, field", [
    (0, 2566, "monthTh"),
    (13, 2566, "monthTh"),
    (9.5, 2566, "monthTh"),
    (None, 2566, "monthTh"),
    ("9", 2566, "monthTh"),
    (9, None, "yearBe"),
    (9, 2566.5, "yearBe"),
    (9, float("nan"), "yearBe"),
    (9, True, "yearBe"),
])
def test_invalid_month_or_year(month, year, field):
    with pytest.raises(ValidationError) as ei:
        compute_base_values(month, year, 15, 14, 45)
    assert field in str(ei.value)
    assert ei.value.errors()[0]["loc"] == [field]


@given(
    st.integers(1, 12), st.integers(2300, 2800), st.integers(1, 28),
    st.integers(0, 23), st.integers(0, 59),
)
def test_solar_longitudes_are_wrapped(month, year, day, hour, minute):
    bv = compute_base_values(month, year, day, hour, minute)
    assert 0 <= bv.solar_longitude_mean < 21600
    assert 0 <= bv.solar_longitude_corrected < 21600
    assert (bv.solar_longitude_mean - bv.solar_longitude_corrected) % 21600 == 23
    assert bv.solar_cycle_base_minutes % 21600 == bv.solar_longitude_corrected
