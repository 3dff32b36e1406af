# suriyayart/core/epoch.py
# -----------------------------------------------------------------------------
# Epoch base values for the Suriyayart almanac
#
# Public API:
#   compute_base_values(month_th, year_be, day, hour, minute) -> BaseValues
#
# Guarantees:
#   • Julian day via the century-adjusted civil→Julian conversion, anchored to
#     the almanac epoch (JD 1954167.5) and rounded half-up.
#   • The extra sub-day term (hour/60 + minute)/60/60/24 is kept as the almanac
#     tables were calibrated with it.
#   • Solar year picked with the leap-cycle polynomial in years since 1181 BE.
#   • solar_longitude_mean / solar_longitude_corrected wrapped into [0, 21600).
#   • Pure and deterministic; compute once per chart and pass it down.
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict
import logging
import math

from suriyayart.core.constants import round_half_up, trunc_rem, wrap_arcmin
from suriyayart.core.validators import ValidationError, _as_int, _err

__all__ = ["BaseValues", "compute_base_values", "EPOCH_JULIAN_DAY", "EPOCH_YEAR_BE"]

log = logging.getLogger(__name__)

EPOCH_JULIAN_DAY = 1954167.5
EPOCH_YEAR_BE = 1181

# solar cycle: 292207 units per year of 800-unit days
_CYCLE_UNITS = 292207
_UNITS_PER_DAY = 800
_CYCLE_OFFSET = 373


# ───────────────────────────── Dataclass ─────────────────────────────

@dataclass(frozen=True)
class BaseValues:
    relative_julian_day: int
    time_of_day_hours: float
    solar_cycle_base_minutes: int   # accumulated solar arc since the model epoch
    solar_longitude_mean: int       # [0, 21600)
    solar_longitude_corrected: int  # mean − 23, wrapped

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ───────────────────────────── Julian day ─────────────────────────────

def _julian_day(year_be: int, month: int, day: int, hour: int, minute: int) -> float:
    year_ad = year_be - 543
    jy = year_ad if month > 2 else year_ad - 1
    jm = month + 1 if month > 2 else month + 13
    century = math.floor(jy * 0.01)
    jd_base = (
        math.floor(jy * 365.25)
        + math.floor(jm * 30.6)
        + day
        + 1720997
        - century
        + math.floor(century * 0.25)
    )
    if hour < 12:
        jd_int = jd_base - 1
        frac = hour / 24 - 0.5 + 1.5
    else:
        jd_int = jd_base
        frac = hour / 24 - 0.5
    frac += (hour / 60 + minute) / 60 / 60 / 24
    return jd_int + frac


def _solar_year(rel_year: int, rjd: int, hour: int, minute: int) -> int:
    """Year of the solar cycle: the prior one until the ceiling day has passed the correction time."""
    ceiling = -((-(_CYCLE_UNITS * rel_year + _CYCLE_OFFSET)) // _UNITS_PER_DAY)
    corr = (
        rel_year * 0.25875
        + math.trunc(rel_year / 100 + 0.38)
        - math.trunc(rel_year / 4 + 0.5)
        - math.trunc(rel_year / 400 + 0.595)
        - 5.53375
    )
    c_days = math.trunc(corr)
    c_hours = math.trunc((corr - c_days) * 24)
    c_minutes = math.trunc(((corr - c_days) * 24 - c_hours) * 60)

    clock = hour * 60 + minute / 60
    correction_clock = c_hours * 60 + c_minutes / 60
    past_correction = clock > correction_clock

    if rjd < ceiling or (rjd == ceiling and not past_correction):
        return rel_year - 1
    return rel_year


# ───────────────────────────── Public API ─────────────────────────────

def compute_base_values(month_th: Any, year_be: Any, day: int, hour: int, minute: int) -> BaseValues:
    """
    Derive the shared epoch quantities for one civil moment.

    Raises ValidationError naming `monthTh` or `yearBe` when those are missing,
    non-integer or (for the month) outside 1..12.
    """
    if month_th is None:
        raise ValidationError(_err("monthTh", "`monthTh` is required", "value_error.missing"))
    month = _as_int(month_th, "monthTh")
    if not (1 <= month <= 12):
        raise ValidationError(_err("monthTh", "`monthTh` must be an integer between 1 and 12", "value_error.range"))
    if year_be is None:
        raise ValidationError(_err("yearBe", "`yearBe` is required", "value_error.missing"))
    year = _as_int(year_be, "yearBe")

    rjd = round_half_up(_julian_day(year, month, day, hour, minute) - EPOCH_JULIAN_DAY)
    tf = hour + minute / 60

    rel_year = year - EPOCH_YEAR_BE
    solar_year = _solar_year(rel_year, rjd, hour, minute)

    # position inside the solar year, in 1/800-day units
    pos = trunc_rem(
        (rjd - 1) * _UNITS_PER_DAY + math.trunc((tf * _UNITS_PER_DAY) / 24) - _CYCLE_OFFSET,
        _CYCLE_UNITS,
    )
    rem = trunc_rem(pos, 24350)
    turns = pos // 24350
    degrees = rem // 811
    minutes = trunc_rem(rem, 811) // 14 - 3

    mean = wrap_arcmin(turns * 1800 + degrees * 60 + minutes)
    corrected = wrap_arcmin(mean - 23)
    offset = solar_year - 610 if pos >= 364 else solar_year - 611

    bv = BaseValues(
        relative_julian_day=rjd,
        time_of_day_hours=tf,
        solar_cycle_base_minutes=offset * 21600 + corrected,
        solar_longitude_mean=mean,
        solar_longitude_corrected=corrected,
    )
    log.debug("base values for %s-%s-%s %02d:%02d → %s", year, month, day, hour, minute, bv)
    return bv
