# suriyayart/core/ruling_planets.py
"""
Ruling planets of a finished chart.

The bodies sharing the ascendant's channel "rule" the chart. Extraction works
on the rendered channel strings only: find the slot carrying the ascendant
symbol, read the digits written beside it and name the bodies they denote.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence
import logging
import re

from suriyayart.core.constants import ASCENDANT_SYMBOL, BODY_INFO, THAI_DIGITS

__all__ = [
    "PLANET_NAME_MAP",
    "RulingPlanets",
    "RulingPlanetsError",
    "find_ruling_planets",
    "format_ruling_planets",
]

log = logging.getLogger(__name__)

# ASCII digit → "ดาว" + Thai body name
PLANET_NAME_MAP: Dict[str, str] = {
    str(info.digit): "ดาว" + info.thai_name
    for info in BODY_INFO.values()
    if info.digit is not None
}

_DIGIT_RE = re.compile(r"[0-9]")
_THAI_TO_ASCII = str.maketrans({d: str(i) for i, d in enumerate(THAI_DIGITS)})


class RulingPlanetsError(ValueError):
    """Extraction failure; `code` tells the cases apart."""
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class RulingPlanets:
    numbers: List[str] = field(default_factory=list)  # unique ASCII digits, first-seen order
    names: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"numbers": list(self.numbers), "names": list(self.names)}


def _ascendant_token(chart: Sequence[Any]) -> str:
    for item in chart:
        if item is not None and ASCENDANT_SYMBOL in str(item):
            if not isinstance(item, str):
                raise RulingPlanetsError("ascendant_not_text", "Ascendant token is not a string")
            return item
    raise RulingPlanetsError("ascendant_not_found", "Unable to locate ascendant information in chart")


def find_ruling_planets(chart: Any) -> RulingPlanets:
    """
    Ruling planets from a 12-slot channel list (Thai or ASCII digits).

    Raises RulingPlanetsError with code one of: chart_not_list,
    ascendant_not_found, ascendant_not_text, no_ruling_digits,
    unmapped_ruling_digits.
    """
    if isinstance(chart, (str, bytes)) or not isinstance(chart, (list, tuple)):
        raise RulingPlanetsError("chart_not_list", "Chart must be an array")

    token = _ascendant_token(chart).translate(_THAI_TO_ASCII)
    numbers = list(dict.fromkeys(_DIGIT_RE.findall(token)))
    if not numbers:
        raise RulingPlanetsError("no_ruling_digits", "No ruling planets found in ascendant token")

    names = [PLANET_NAME_MAP[n] for n in numbers if n in PLANET_NAME_MAP]
    if not names:
        raise RulingPlanetsError("unmapped_ruling_digits", "Unable to map ruling planet numbers to names")
    return RulingPlanets(numbers=numbers, names=names)


def format_ruling_planets(info: RulingPlanets) -> str:
    """'ดาวเกตุ (9) และ ดาวศุกร์ (6)' style summary."""
    return " และ ".join(
        f"{name} ({info.numbers[i] if i < len(info.numbers) else '?'})"
        for i, name in enumerate(info.names)
    )
