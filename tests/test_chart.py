from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given, strategies as st

from suriyayart.core.chart import (
    INDETERMINATE,
    CalculationResult,
    PlanetPositions,
    ThaiAstrologyChart,
    calculate_all_positions,
    calculate_tanuseth,
    encode_channels,
    generate_thai_astrology_chart,
    ruler_of,
)
from suriyayart.core.constants import Body, PROVINCE_TIME_OFFSETS, THAI_DIGITS
from suriyayart.core.numerals import format_channel_outputs
from suriyayart.core.validators import CalculationInput, ValidationError

# Reference charts: input, positions (asc, sun, moon, mars, mercury, jupiter, venus,
# saturn, rahu, ketu, uranus), tanuseth, channels, sun (deg, min)
REFERENCE_CHARTS = [
    (
        dict(day=15, month_th=9, year_be=2566, hour=14, minute=45, province="กรุงเทพมหานคร"),
        (8, 4, 5, 5, 4, 0, 3, 10, 0, 2, 1), 7,
        ["๕๘", "๐", "๙", "๖", "๑๔", "๒๓", "", "", "ลั", "", "๗*", ""], (27, 29),
    ),
    (
        dict(day=31, month_th=12, year_be=2567, hour=23, minute=59, province="อุบลราชธานี"),
        (6, 8, 8, 3, 7, 1, 10, 10, 11, 6, 1), 3,
        ["", "๕๐", "", "๓*", "", "", "ลั๙", "๔", "๑๒", "", "๖๗", "๘"], (15, 58),
    ),
    (
        dict(day=10, month_th=4, year_be=2530, hour=11, minute=59, province="x"),
        (3, 11, 4, 1, 11, 11, 10, 7, 11, 10, 7), 2,
        ["", "๓", "", "ลั", "๒*", "", "", "๗๐", "", "", "๖๙", "๑๔๕๘"], (26, 14),
    ),
    (
        dict(day=5, month_th=7, year_be=2480, hour=3, minute=15, province="สงขลา"),
        (0, 2, 1, 7, 2, 9, 1, 11, 7, 7, 0), 1,
        ["ลั๐", "๒๖", "๑*๔", "", "", "", "", "๓๘๙", "", "๕", "", "๗"], (19, 21),
    ),
    (
        dict(day=20, month_th=3, year_be=1500, hour=18, minute=40, province="ยะลา"),
        (5, 11, 4, 6, 11, 1, 0, 8, 4, 11, 2), 7,
        ["๖", "๕", "๐", "", "๒๘", "ลั", "๓", "", "๗*", "", "", "๑๔๙"], (23, 3),
    ),
    (
        dict(day=14, month_th=4, year_bc=1990, hour=9, minute=30, province="ขอนแก่น"),
        (1, 0, 7, 10, 0, 2, 10, 8, 9, 2, 8), 7,
        ["๑๔", "ลั", "๕๙", "", "", "", "", "๒", "๗*๐", "๘", "๓๖", ""], (0, 17),
    ),
    (
        dict(day=7, month_th=11, year_be=2600, hour=12, minute=1, province="ระนอง"),
        (9, 6, 11, 7, 7, 10, 6, 11, 2, 10, 6), 7,
        ["", "", "๘", "", "", "", "๑๖๐", "๓๔", "", "ลั", "๕๙", "๒๗*"], (19, 58),
    ),
    # ruler chains that run backwards round the zodiac
    (
        dict(day=1, month_th=1, year_be=2500, hour=0, minute=0, province="เชียงใหม่"),
        (5, 8, 8, 11, 8, 5, 7, 7, 7, 1, 3), 5,
        ["", "๙", "", "๐", "", "ลั๕*", "", "๖๗๘", "๑๒๔", "", "", "๓"], (16, 34),
    ),
    (
        dict(day=29, month_th=2, year_be=2543, hour=6, minute=30, province="ภูเก็ต"),
        (10, 10, 8, 11, 10, 0, 9, 0, 3, 10, 9), 1,
        ["๕๗", "", "", "๘", "", "", "", "", "๒", "๖๐", "ลั๑*๔๙", "๓"], (15, 48),
    ),
    (
        dict(day=1, month_th=1, year_be=1700, hour=8, minute=5, province="ตาก"),
        (10, 9, 1, 8, 8, 11, 10, 5, 7, 5, 7), 6,
        ["", "๒", "", "", "", "๗๙", "", "๘๐", "๓๔", "๑", "ลั๖*", "๕"], (0, 12),
    ),
    (
        dict(day=25, month_th=6, year_be=2555, hour=21, minute=10, province="นครพนม"),
        (8, 2, 4, 5, 3, 1, 1, 5, 7, 3, 11), 6,
        ["", "๕๖*", "๑", "๔๙", "๒", "๓๗", "", "๘", "ลั", "", "", "๐"], (10, 11),
    ),
]


def test_backward_ruler_chain_still_fills_channels():
    # asc 6 → venus in 1 → venus again: d1 = 8, d2 = 1
    result = calculate_all_positions(dict(day=17, monthTh=5, yearBe=2508, hour=16, minute=4, province="นครพนม"))
    assert result.positions == PlanetPositions(6, 1, 7, 4, 0, 1, 1, 10, 1, 7, 4)
    assert result.tanuseth == 1
    assert list(result.channel_outputs) == ["๔", "๑*๕๖๘", "", "", "๓๐", "", "ลั", "๒๙", "", "", "๗", ""]


@pytest.mark.parametrize("kwargs, positions, tanuseth, channels, sun", REFERENCE_CHARTS)
def test_reference_charts(kwargs, positions, tanuseth, channels, sun):
    result = calculate_all_positions(CalculationInput(**kwargs))
    assert result.positions == PlanetPositions(*positions)
    assert result.tanuseth == tanuseth
    assert list(result.channel_outputs) == channels
    assert result.sun_position == sun


def test_sample_chart_end_to_end(sample_input):
    result = calculate_all_positions(sample_input)
    assert result.sun_position == (27, 29)
    assert format_channel_outputs(result) == ["58", "0", "9", "6", "14", "23", "", "", "L", "", "7*", ""]
    assert result.to_dict() == {
        "positions": {
            "ascendant": 8, "sun": 4, "moon": 5, "mars": 5, "mercury": 4, "jupiter": 0,
            "venus": 3, "saturn": 10, "rahu": 0, "ketu": 2, "uranus": 1,
        },
        "tanuseth": 7,
        "channelOutputs": ["๕๘", "๐", "๙", "๖", "๑๔", "๒๓", "", "", "ลั", "", "๗*", ""],
        "sunPosition": [27, 29],
    }


def test_noon_boundary_keeps_the_chart():
    before = calculate_all_positions(dict(day=10, monthTh=4, yearBe=2530, hour=11, minute=59, province="x"))
    at_noon = calculate_all_positions(dict(day=10, monthTh=4, yearBe=2530, hour=12, minute=0, province="x"))
    assert at_noon.positions == before.positions
    assert at_noon.tanuseth == before.tanuseth
    assert at_noon.sun_position == before.sun_position


def test_accepts_payload_mapping():
    from_payload = calculate_all_positions({"day": 15, "monthTh": 9, "yearBe": 2566, "hour": 14, "minute": 45, "province": "Bangkok"})
    assert from_payload.tanuseth == 7
    assert from_payload.positions.ascendant == 8


def test_invalid_input_raises_before_computing():
    with pytest.raises(ValidationError):
        calculate_all_positions({"day": 15, "monthTh": 13, "yearBe": 2566, "hour": 14, "minute": 45})
    with pytest.raises(ValidationError):
        calculate_all_positions({"day": 15, "monthTh": 9, "hour": 14, "minute": 45})


# ───────────────────────── tanuseth & channels ─────────────────────────

def _positions(**signs) -> PlanetPositions:
    base = {b.value: 0 for b in Body}
    base.update(signs)
    return PlanetPositions(**base)


def test_ruler_of():
    assert ruler_of(0) is Body.MARS
    assert ruler_of(4) is Body.SUN
    assert ruler_of(10) is Body.RAHU
    assert ruler_of(12) is None
    assert ruler_of(-1) is None


def test_tanuseth_zero_remainder_maps_to_seven():
    # asc 0 → mars; mars in 6 → venus; venus in 6: d1 = 7, d2 = 1
    assert calculate_tanuseth(_positions(ascendant=0, mars=6, venus=6)) == 7


def test_tanuseth_distances_wrap_forward():
    # asc 5 → mercury in 11 → jupiter in 1: d1 = 7, d2 = 3, 21 ≡ 0 → 7
    assert calculate_tanuseth(_positions(ascendant=5, mercury=11, jupiter=1)) == 7
    # asc 5 → mercury in 8 → jupiter in 5: d1 = 4, d2 = 10, 40 ≡ 5
    assert calculate_tanuseth(_positions(ascendant=5, mercury=8, jupiter=5)) == 5
    # asc 6 → venus in 1 → venus: d1 = 8, d2 = 1
    assert calculate_tanuseth(_positions(ascendant=6, venus=1)) == 1


def test_tanuseth_broken_chain_is_indeterminate():
    assert calculate_tanuseth(_positions(ascendant=12)) == INDETERMINATE


def test_encode_channels_marks_the_numerology_body():
    positions = _positions(ascendant=3, sun=3, moon=1)
    slots = encode_channels(positions, 2)
    assert slots[1] == "๒*"
    assert slots[3] == "ลั๑"
    assert slots[0] == "๓๔๕๖๗๘๙๐"
    assert len(slots) == 12


def test_encode_channels_indeterminate_is_blank():
    assert encode_channels(_positions(), INDETERMINATE) == ("",) * 12


# ───────────────────────── ruling-planet sidecar ─────────────────────────

def test_chart_with_ruling_planets():
    chart = generate_thai_astrology_chart(CalculationInput(day=31, month_th=12, year_be=2567, hour=23, minute=59, province="อุบลราชธานี"))
    assert isinstance(chart, ThaiAstrologyChart)
    assert chart.ruling_planets is not None
    assert chart.ruling_planets.numbers == ["9"]
    assert chart.ruling_planets.names == ["ดาวเกตุ"]
    assert chart.ruling_planets_error is None
    assert chart.to_dict()["rulingPlanets"] == {"numbers": ["9"], "names": ["ดาวเกตุ"]}


def test_chart_reports_ruling_planet_failure(sample_input):
    chart = generate_thai_astrology_chart(sample_input)
    assert chart.ruling_planets is None
    assert chart.ruling_planets_error == "No ruling planets found in ascendant token"
    assert chart.tanuseth == 7
    out = chart.to_dict()
    assert "rulingPlanets" not in out
    assert out["rulingPlanetsError"] == "No ruling planets found in ascendant token"


def test_backward_chain_chart_has_ruling_planets():
    chart = generate_thai_astrology_chart(dict(day=1, monthTh=1, yearBe=2500, hour=0, minute=0, province="เชียงใหม่"))
    assert chart.tanuseth == 5
    assert chart.ruling_planets_error is None
    assert chart.ruling_planets.numbers == ["5"]
    assert chart.ruling_planets.names == ["ดาวพฤหัสบดี"]


# ───────────────────────── properties ─────────────────────────

provinces = st.sampled_from(sorted(PROVINCE_TIME_OFFSETS) + ["Bangkok", "Chiang Mai", "nowhere", ""])
moments = st.builds(
    dict,
    day=st.integers(1, 31),
    month_th=st.integers(1, 12),
    year_be=st.integers(2300, 2700),
    hour=st.integers(0, 23),
    minute=st.integers(0, 59),
    province=provinces,
)


@given(moments)
def test_deterministic(kw):
    assert calculate_all_positions(CalculationInput(**kw)) == calculate_all_positions(CalculationInput(**kw))


@given(moments)
def test_ranges(kw):
    result = calculate_all_positions(CalculationInput(**kw))
    assert all(0 <= sign <= 11 for _, sign in result.positions.items())
    assert 1 <= result.tanuseth <= 7
    assert len(result.channel_outputs) == 12
    deg, minute = result.sun_position
    assert 0 <= deg <= 29 and 0 <= minute <= 59


@given(moments)
def test_year_equivalence(kw):
    be = calculate_all_positions(CalculationInput(**kw))
    kw_bc = dict(kw)
    kw_bc["year_bc"] = kw_bc.pop("year_be") - 543
    assert calculate_all_positions(CalculationInput(**kw_bc)) == be


@given(moments)
def test_unknown_province_matches_default_offset(kw):
    unknown = calculate_all_positions(CalculationInput(**{**kw, "province": "Nowhere-in-particular"}))
    bangkok = calculate_all_positions(CalculationInput(**{**kw, "province": "กรุงเทพมหานคร"}))
    assert unknown == bangkok


@given(moments)
def test_channel_coverage(kw):
    result = calculate_all_positions(CalculationInput(**kw))
    joined = "".join(result.channel_outputs)
    assert result.tanuseth != INDETERMINATE
    assert sum(joined.count(body.symbol) for body in Body) == 11
    for body, sign in result.positions.items():
        assert body.symbol in result.channel_outputs[sign]
        assert joined.count(body.symbol) == 1
    assert joined.count("*") == 1
    marked = next(b for b in Body if b.tanuseth_number == result.tanuseth)
    assert THAI_DIGITS[result.tanuseth] + "*" in result.channel_outputs[result.positions[marked]]


def test_results_are_immutable(sample_input):
    result = calculate_all_positions(sample_input)
    assert isinstance(result, CalculationResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.tanuseth = 1  # type: ignore[misc]
