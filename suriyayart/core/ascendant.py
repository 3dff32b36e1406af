# suriyayart/core/ascendant.py
"""
Unequal-house ascendant.

The day is divided into twelve rising intervals of unequal length
(SIGN_DURATIONS_MINUTES, summing to 1440). The Sun's own progress through
those intervals is added to the minutes elapsed since local sunrise
(06:00 plus a per-province offset); the interval containing that total is the
rising sign.

Province names resolve in this order:
1) exact Thai province name (after trimming whitespace),
2) romanized alias, compared as a slug (lowercase alphanumerics only),
3) DEFAULT_PROVINCE_OFFSET.
"""

from __future__ import annotations

from typing import List, Optional, Tuple
import difflib
import logging
import math

from suriyayart.core.constants import (
    DEFAULT_PROVINCE_OFFSET,
    MINUTES_PER_DAY,
    PROVINCE_ALIASES,
    PROVINCE_TIME_OFFSETS,
    SIGN_ARC,
    SIGN_DURATIONS_MINUTES,
)

__all__ = [
    "SIGN_DURATIONS_MINUTES",
    "canonical_province",
    "province_offset",
    "suggest_provinces",
    "calculate_ascendant",
]

log = logging.getLogger(__name__)

_SUNRISE_MINUTES = 360  # 06:00


# ──────────────────────────────────────────────────────────────────────────────
# Province resolution
# ──────────────────────────────────────────────────────────────────────────────
def _slug(s: str | None) -> str:
    if not s:
        return ""
    return "".join(ch for ch in s.lower() if ch.isalnum())


def canonical_province(name: Optional[str]) -> Optional[str]:
    """Thai province key for `name`, or None when it is not a known province."""
    if not name:
        return None
    key = name.strip()
    if key in PROVINCE_TIME_OFFSETS:
        return key
    return PROVINCE_ALIASES.get(_slug(key))


def province_offset(name: Optional[str]) -> int:
    """Minutes after 06:00 at which the sun rises in `name`."""
    canon = canonical_province(name)
    if canon is None:
        if name:
            log.debug("unknown province %r; using default offset %d", name, DEFAULT_PROVINCE_OFFSET)
        return DEFAULT_PROVINCE_OFFSET
    return PROVINCE_TIME_OFFSETS[canon]


def suggest_provinces(name: str, n: int = 3) -> List[str]:
    """Closest known province names (Thai keys) for an unrecognized input."""
    best = difflib.get_close_matches(name.strip(), list(PROVINCE_TIME_OFFSETS), n=n, cutoff=0.6)
    for hit in difflib.get_close_matches(_slug(name), list(PROVINCE_ALIASES), n=n, cutoff=0.6):
        canon = PROVINCE_ALIASES[hit]
        if canon not in best:
            best.append(canon)
    return best[:n]


# ──────────────────────────────────────────────────────────────────────────────
# Rising-sign walk
# ──────────────────────────────────────────────────────────────────────────────
def _sun_progression_minutes(sun_longitude: int) -> float:
    """Clock minutes the Sun has advanced through the rising table."""
    sign = sun_longitude // SIGN_ARC
    in_sign = sun_longitude % SIGN_ARC
    degrees = in_sign // 60
    minutes = in_sign % 60
    before = sum(SIGN_DURATIONS_MINUTES[:sign])
    duration = SIGN_DURATIONS_MINUTES[sign]
    progress = degrees + minutes / 60
    return before + (duration * (progress / 30) if duration > 0 else 0)


def _locate(minute_of_day: float) -> Tuple[int, float]:
    """(sign index, degrees into that sign) for a minute of the rising day."""
    start = 0.0
    for sign, duration in enumerate(SIGN_DURATIONS_MINUTES):
        if duration <= 0:
            continue
        end = start + duration
        if start >= end:
            inside = minute_of_day >= start or minute_of_day < end
        else:
            inside = start <= minute_of_day < end
        if inside:
            into = (minute_of_day - start) % MINUTES_PER_DAY
            return sign, (into * 30) / duration
        start = end % MINUTES_PER_DAY
    return 0, 0.0


def calculate_ascendant(sun_longitude: int, hour: int, minute: int, province: Optional[str]) -> int:
    """
    Rising sign (0..11) for a clock time, given the Sun's precise longitude.
    """
    sunrise = _SUNRISE_MINUTES + province_offset(province)
    elapsed = (hour * 60 + minute - sunrise) % MINUTES_PER_DAY
    rising = (_sun_progression_minutes(sun_longitude) + elapsed) % MINUTES_PER_DAY

    sign, degrees = _locate(rising)
    # sign/degree → arc-minutes → sign
    return math.trunc(((sign * 30 + degrees) * 60) / SIGN_ARC)
