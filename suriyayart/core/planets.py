# suriyayart/core/planets.py
"""
Suriyayart planetary models.

Each model takes the shared `BaseValues` for one moment and returns a sign
index (0..11). Mean longitudes come from integer cycle ratios applied to
`solar_cycle_base_minutes`; Mars, Jupiter, Saturn and Uranus then go through
the generic two-pass correction, Venus and Mercury through the solar-seeded
variant, and the Sun and Moon through their own anomaly tables. Rahu and Ketu
are uncorrected node cycles.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping
import math

from suriyayart.core.constants import (
    Body,
    MOON_ANOMALY_TABLE,
    SIGN_ARC,
    SUN_ANOMALY_TABLE,
    trunc_div,
    trunc_rem,
    wrap_arcmin,
)
from suriyayart.core.epoch import BaseValues
from suriyayart.core.quadrant import (
    AdjustmentConstants,
    apply_planetary_adjustments,
    describe_quadrant,
    interpolate_anomaly_table,
    seeded_two_pass_correction,
)

__all__ = [
    "get_sign_index",
    "sun_precise_longitude",
    "calculate_sun", "calculate_sun_degrees", "calculate_sun_minutes",
    "calculate_moon", "calculate_mars", "calculate_mercury", "calculate_jupiter",
    "calculate_venus", "calculate_saturn", "calculate_rahu", "calculate_ketu",
    "calculate_uranus",
    "BODY_MODELS",
]

MARS = AdjustmentConstants(baseline=7620, denominator_base=2700, scale=4 / 15)
JUPITER = AdjustmentConstants(baseline=10320, denominator_base=5520, scale=3 / 7)
SATURN = AdjustmentConstants(baseline=14820, denominator_base=3780, scale=7 / 6)
URANUS = AdjustmentConstants(baseline=7440, denominator_base=38640, scale=3 / 7)


def get_sign_index(longitude: int) -> int:
    """Sign of a wrapped longitude; a full circle reads as Aries."""
    sign = longitude // SIGN_ARC
    return 0 if sign == 12 else sign


def _mean(value: int) -> int:
    # sign-preserving; pre-epoch dates give negative means
    return trunc_rem(value, 21600)


def _anomaly_corrected(longitude: int, anomaly: int, table) -> int:
    q = describe_quadrant(anomaly)
    return wrap_arcmin(longitude + interpolate_anomaly_table(q.arc_minutes, table) * q.direction)


# ───────────────────────── Sun ─────────────────────────

def sun_precise_longitude(bv: BaseValues) -> int:
    mean = bv.solar_longitude_mean
    return _anomaly_corrected(mean, wrap_arcmin(mean - 4800), SUN_ANOMALY_TABLE)


def calculate_sun(bv: BaseValues) -> int:
    return get_sign_index(sun_precise_longitude(bv))


def calculate_sun_degrees(bv: BaseValues) -> int:
    return (sun_precise_longitude(bv) % SIGN_ARC) // 60


def calculate_sun_minutes(bv: BaseValues) -> int:
    return (sun_precise_longitude(bv) % SIGN_ARC) % 60


# ───────────────────────── Moon ─────────────────────────

def calculate_moon(bv: BaseValues) -> int:
    rjd, tf = bv.relative_julian_day, bv.time_of_day_hours
    # lunar mean motion: 703 units/day over a 20760-unit cycle
    cycle = trunc_rem((rjd - 1) * 703 + 650 + math.trunc((tf * 703) / 24), 20760)
    mean = wrap_arcmin(
        (cycle // 692) * 720 + math.trunc(1.04 * trunc_rem(cycle, 692)) - 40 + bv.solar_longitude_mean
    )
    # anomalistic cycle of 3232 days
    anomaly_day = trunc_rem(rjd - 1 - 621, 3232)
    apogee = wrap_arcmin(math.trunc(((anomaly_day + tf / 24) / 3232) * 21600) + 2)
    return get_sign_index(_anomaly_corrected(mean, wrap_arcmin(mean - apogee), MOON_ANOMALY_TABLE))


# ───────────────────────── outer planets ─────────────────────────

def calculate_mars(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base, 2) + (base * 16) // 505 + 5420)
    return get_sign_index(apply_planetary_adjustments(mean, bv.solar_longitude_corrected, MARS))


def calculate_jupiter(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base, 12) + base // 1032 + 14297)
    return get_sign_index(apply_planetary_adjustments(mean, bv.solar_longitude_corrected, JUPITER))


def calculate_saturn(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base, 30) + (base * 6) // 10000 + 11944)
    return get_sign_index(apply_planetary_adjustments(mean, bv.solar_longitude_corrected, SATURN))


def calculate_uranus(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base, 84) + base // 7224 + 16277)
    return get_sign_index(apply_planetary_adjustments(mean, bv.solar_longitude_corrected, URANUS))


# ───────────────────────── inner planets ─────────────────────────

def calculate_venus(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base * 5, 3) - (base * 10) // 243 + 10944)
    return get_sign_index(
        seeded_two_pass_correction(bv.solar_longitude_corrected, mean, 4800, 19200, 60 * 11)
    )


def calculate_mercury(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    mean = _mean(trunc_div(base * 7, 46) + base * 4 + 10642)
    return get_sign_index(
        seeded_two_pass_correction(bv.solar_longitude_corrected, mean, 13200, 6000, 60 * 21)
    )


# ───────────────────────── lunar nodes ─────────────────────────

def calculate_rahu(bv: BaseValues) -> int:
    base = bv.solar_cycle_base_minutes
    node = trunc_rem(base // 20 + base // 265, 21600)
    return get_sign_index(wrap_arcmin(15150 - node))


def calculate_ketu(bv: BaseValues) -> int:
    day_in_cycle = trunc_rem(bv.relative_julian_day - 1 - 344, 679)
    node = trunc_rem(math.trunc(((day_in_cycle + bv.time_of_day_hours / 24) * 21600) / 679), 21600)
    return get_sign_index(wrap_arcmin(21600 - node))


BODY_MODELS: Mapping[Body, Callable[[BaseValues], int]] = MappingProxyType({
    Body.SUN: calculate_sun,
    Body.MOON: calculate_moon,
    Body.MARS: calculate_mars,
    Body.MERCURY: calculate_mercury,
    Body.JUPITER: calculate_jupiter,
    Body.VENUS: calculate_venus,
    Body.SATURN: calculate_saturn,
    Body.RAHU: calculate_rahu,
    Body.KETU: calculate_ketu,
    Body.URANUS: calculate_uranus,
})
