# suriyayart/core/quadrant.py
"""
Quadrant correction helpers shared by the planetary models.

A longitude difference is folded into one quarter of the circle, looked up in
a 4-entry table at 1800-unit steps and linearly interpolated. The two-pass
equation-of-center correction used by Mars, Jupiter, Saturn and Uranus lives
here, as does the Venus/Mercury variant seeded from the Sun and the 7-entry
anomaly interpolation used by the Sun and Moon.

All inputs and outputs are arc-minutes (21600 per circle).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence
import math

from suriyayart.core.constants import (
    QUADRANT_ADJUST_TABLE,
    round_half_up,
    wrap_arcmin,
)

__all__ = [
    "Quadrant",
    "SecondaryAdjustment",
    "AdjustmentConstants",
    "describe_quadrant",
    "lookup_quadrant_adjustment",
    "secondary_adjustment_parameters",
    "apply_planetary_adjustments",
    "seeded_two_pass_correction",
    "interpolate_anomaly_table",
]

_QUARTER = 5400
_HALF = 10800
_STEP = 1800
_ANOMALY_STEP = 900


class Quadrant(NamedTuple):
    index: int          # 1..4
    arc_minutes: int    # distance folded into one quarter
    direction: int      # −1 in Q1/Q2, +1 in Q3/Q4


class SecondaryAdjustment(NamedTuple):
    half: int
    direction: int      # +1 in Q1/Q4, −1 in Q2/Q3
    interpolated: int


@dataclass(frozen=True)
class AdjustmentConstants:
    baseline: int           # subtracted from the mean before the first pass
    denominator_base: int
    scale: float            # applied to the first-pass denominator in the second pass


# ───────────────────────── table lookups ─────────────────────────

def _quadrant_index(value: int) -> int:
    return value // _QUARTER + 1


def describe_quadrant(value: int) -> Quadrant:
    v = wrap_arcmin(value)
    q = _quadrant_index(v)
    if q == 1:
        arc = v
    elif q == 2:
        arc = _HALF - v
    elif q == 3:
        arc = v - _HALF
    else:
        arc = 21600 - v
    return Quadrant(q, arc, -1 if q in (1, 2) else 1)


def _interpolate(arc: float) -> float:
    i = math.floor(arc / _STEP)
    lo = QUADRANT_ADJUST_TABLE[i % 4]
    hi = QUADRANT_ADJUST_TABLE[(i + 1) % 4]
    f = arc / _STEP - i
    return f * (hi - lo) + lo


def lookup_quadrant_adjustment(arc_minutes: float) -> int:
    """Interpolated table value, in arc-seconds (×60), rounded half-up."""
    return round_half_up(_interpolate(arc_minutes) * 60)


def secondary_adjustment_parameters(value: int) -> SecondaryAdjustment:
    """Same table, folded about 5400/16200 instead of 0/10800."""
    v = wrap_arcmin(value)
    q = _quadrant_index(v)
    if q == 1:
        arc = _QUARTER - v
    elif q == 2:
        arc = v - _QUARTER
    elif q == 3:
        arc = 16200 - v
    else:
        arc = v - 16200
    interpolated = round_half_up(_interpolate(arc) + 0.5)
    return SecondaryAdjustment(interpolated // 2, 1 if q in (1, 4) else -1, interpolated)


def _scaled(adjustment: int, denominator: int) -> int:
    return round_half_up(adjustment * 60 / denominator) if denominator != 0 else 0


# ───────────────────────── two-pass corrections ─────────────────────────

def _second_pass(position: int, reference: int, numerator_base: int) -> int:
    """Correct `position` against `reference`; `numerator_base` excludes the table-derived term."""
    offset = wrap_arcmin(position) - reference
    q = describe_quadrant(offset)
    adj = lookup_quadrant_adjustment(q.arc_minutes)
    sec = secondary_adjustment_parameters(wrap_arcmin(offset))
    denom = round_half_up(round_half_up(adj / 60) / 3) + numerator_base + sec.interpolated * sec.direction
    return wrap_arcmin(wrap_arcmin(position) + _scaled(adj, denom) * q.direction)


def apply_planetary_adjustments(mean: int, reference: int, constants: AdjustmentConstants) -> int:
    """
    Two-pass correction of a mean longitude.

    Pass 1 folds `mean − baseline`; pass 2 folds the result against
    `reference` (the corrected solar longitude). A zero denominator
    contributes no adjustment.
    """
    offset = mean - constants.baseline
    q = describe_quadrant(offset)
    adj = lookup_quadrant_adjustment(q.arc_minutes)
    sec = secondary_adjustment_parameters(wrap_arcmin(offset))
    denom = constants.denominator_base + sec.half * sec.direction
    position = mean + _scaled(adj, denom) * q.direction
    return _second_pass(position, reference, round_half_up(denom * constants.scale))


def seeded_two_pass_correction(
    seed: int, mean: int, offset: int, denominator_base: int, secondary_term: int
) -> int:
    """
    Inner-planet variant: pass 1 starts from the corrected solar longitude
    (`seed`) folded at `offset`; pass 2 runs against the body's own mean
    longitude with a fixed `secondary_term` in the denominator.
    """
    q = describe_quadrant(seed - offset)
    adj = lookup_quadrant_adjustment(q.arc_minutes)
    sec = secondary_adjustment_parameters(wrap_arcmin(seed - offset))
    denom = denominator_base + sec.half * sec.direction
    position = seed + _scaled(adj, denom) * q.direction
    return _second_pass(position, mean, secondary_term)


# ───────────────────────── anomaly tables ─────────────────────────

def interpolate_anomaly_table(arc_minutes: int, table: Sequence[int]) -> int:
    """
    Truncated linear interpolation at 900-unit steps; indices past the end
    read the last entry.
    """
    i = arc_minutes // _ANOMALY_STEP
    last = table[-1]
    lo = table[i] if 0 <= i < len(table) else last
    hi = table[i + 1] if 0 <= i + 1 < len(table) else last
    f = arc_minutes / _ANOMALY_STEP - i
    return math.trunc(f * (hi - lo) + lo)
