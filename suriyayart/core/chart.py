# suriyayart/core/chart.py
"""
Chart assembly: sign positions, tanuseth numerology and the 12 channel strings.

    calculate_all_positions(inp)          -> CalculationResult
    generate_thai_astrology_chart(inp)    -> ThaiAstrologyChart (adds ruling planets)

Base values and the Sun's precise longitude are computed once per call and
shared by every model.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union
import logging

from suriyayart.core.ascendant import calculate_ascendant
from suriyayart.core.constants import (
    Body,
    RULER_INDEX_BODY,
    SIGN_ARC,
    SIGN_COUNT,
    SIGN_RULER_INDEX,
)
from suriyayart.core.epoch import compute_base_values
from suriyayart.core.planets import BODY_MODELS, get_sign_index, sun_precise_longitude
from suriyayart.core.ruling_planets import RulingPlanets, RulingPlanetsError, find_ruling_planets
from suriyayart.core.validators import CalculationInput, parse_chart_payload

__all__ = [
    "INDETERMINATE",
    "PlanetPositions",
    "CalculationResult",
    "ThaiAstrologyChart",
    "ruler_of",
    "calculate_tanuseth",
    "encode_channels",
    "calculate_all_positions",
    "generate_thai_astrology_chart",
]

log = logging.getLogger(__name__)

INDETERMINATE = -1


@dataclass(frozen=True)
class PlanetPositions:
    ascendant: int
    sun: int
    moon: int
    mars: int
    mercury: int
    jupiter: int
    venus: int
    saturn: int
    rahu: int
    ketu: int
    uranus: int

    def __getitem__(self, body: Union[Body, str]) -> int:
        return getattr(self, Body(body).value)

    def items(self):
        return ((Body(f.name), getattr(self, f.name)) for f in fields(self))

    def to_dict(self) -> Dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CalculationResult:
    positions: PlanetPositions
    tanuseth: int                       # 1..7, or -1 when indeterminate
    channel_outputs: Tuple[str, ...]    # always 12 slots
    sun_position: Tuple[int, int]       # (degrees in sign, minutes in degree)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positions": self.positions.to_dict(),
            "tanuseth": self.tanuseth,
            "channelOutputs": list(self.channel_outputs),
            "sunPosition": list(self.sun_position),
        }


@dataclass(frozen=True)
class ThaiAstrologyChart:
    result: CalculationResult
    ruling_planets: Optional[RulingPlanets] = None
    ruling_planets_error: Optional[str] = None

    @property
    def positions(self) -> PlanetPositions:
        return self.result.positions

    @property
    def tanuseth(self) -> int:
        return self.result.tanuseth

    @property
    def channel_outputs(self) -> Tuple[str, ...]:
        return self.result.channel_outputs

    @property
    def sun_position(self) -> Tuple[int, int]:
        return self.result.sun_position

    def to_dict(self) -> Dict[str, Any]:
        out = self.result.to_dict()
        if self.ruling_planets is not None:
            out["rulingPlanets"] = self.ruling_planets.to_dict()
        if self.ruling_planets_error is not None:
            out["rulingPlanetsError"] = self.ruling_planets_error
        return out


# ───────────────────────── numerology ─────────────────────────

def ruler_of(sign: int) -> Optional[Body]:
    """Body ruling `sign`, or None for anything outside the rulership table."""
    index = SIGN_RULER_INDEX.get(sign)
    if index is None:
        return None
    return RULER_INDEX_BODY.get(index)


def calculate_tanuseth(positions: PlanetPositions) -> int:
    """
    Follow the ruler of the ascendant sign, then the ruler of that body's sign.
    The product of the two house distances, taken mod 7 (0 → 7), is the tanuseth.
    A broken ruler chain gives INDETERMINATE.
    """
    asc = positions.ascendant
    lord1 = ruler_of(asc)
    if lord1 is None:
        log.debug("tanuseth indeterminate: no ruler for ascendant sign %s", asc)
        return INDETERMINATE
    sign1 = positions[lord1]
    lord2 = ruler_of(sign1)
    if lord2 is None:
        log.debug("tanuseth indeterminate: no ruler for sign %s (%s)", sign1, lord1.value)
        return INDETERMINATE
    sign2 = positions[lord2]

    # house distances count forward round the zodiac: 1..12
    d1 = (sign1 - asc) % SIGN_COUNT + 1
    d2 = (sign2 - sign1) % SIGN_COUNT + 1
    return (d1 * d2) % 7 or 7


def encode_channels(positions: PlanetPositions, tanuseth: int) -> Tuple[str, ...]:
    """One string per sign: symbols of the bodies in it, "*" after the body whose number is the tanuseth."""
    slots = [""] * SIGN_COUNT
    if tanuseth == INDETERMINATE:
        return tuple(slots)
    for body, sign in positions.items():
        slots[sign] += body.symbol
        if body.tanuseth_number is not None and body.tanuseth_number == tanuseth:
            slots[sign] += "*"
    return tuple(slots)


# ───────────────────────── assembly ─────────────────────────

def _as_input(inp: Union[CalculationInput, Mapping[str, Any]]) -> CalculationInput:
    if isinstance(inp, CalculationInput):
        return inp
    return parse_chart_payload(dict(inp))


def calculate_all_positions(inp: Union[CalculationInput, Mapping[str, Any]]) -> CalculationResult:
    """
    Positions, tanuseth, channels and the Sun's degree/minute for one moment.

    Accepts a CalculationInput or a payload mapping (camelCase keys).
    Raises ValidationError before any computation on bad input.
    """
    ci = _as_input(inp)
    bv = compute_base_values(ci.month_th, ci.resolved_year_be, ci.day, ci.hour, ci.minute)
    sun_lon = sun_precise_longitude(bv)

    signs = {body.value: model(bv) for body, model in BODY_MODELS.items() if body is not Body.SUN}
    signs[Body.SUN.value] = get_sign_index(sun_lon)
    signs[Body.ASCENDANT.value] = calculate_ascendant(sun_lon, ci.hour, ci.minute, ci.province)
    positions = PlanetPositions(**signs)

    tanuseth = calculate_tanuseth(positions)
    in_sign = sun_lon % SIGN_ARC
    return CalculationResult(
        positions=positions,
        tanuseth=tanuseth,
        channel_outputs=encode_channels(positions, tanuseth),
        sun_position=(in_sign // 60, in_sign % 60),
    )


def generate_thai_astrology_chart(inp: Union[CalculationInput, Mapping[str, Any]]) -> ThaiAstrologyChart:
    """calculate_all_positions plus ruling planets; an extraction failure is reported, not raised."""
    result = calculate_all_positions(inp)
    try:
        return ThaiAstrologyChart(result, ruling_planets=find_ruling_planets(list(result.channel_outputs)))
    except RulingPlanetsError as e:
        log.debug("ruling planets unavailable (%s): %s", e.code, e.message)
        return ThaiAstrologyChart(result, ruling_planets_error=e.message)
