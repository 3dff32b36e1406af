# suriyayart/core/numerals.py
"""Rendering of channel strings in Thai or Arabic numerals."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence
import re

from suriyayart.core.constants import ASCENDANT_SYMBOL, THAI_DIGITS

__all__ = ["NUMERAL_SYSTEMS", "to_thai_digits", "to_arabic_digits", "format_channel_outputs"]

NUMERAL_SYSTEMS = ("arabic", "thai")

_CHANNEL_LABEL_RE = re.compile(r"^Channel\s+[0-9]+:", re.IGNORECASE)
_TO_THAI = str.maketrans({str(i): d for i, d in enumerate(THAI_DIGITS)})
_TO_ARABIC = str.maketrans({d: str(i) for i, d in enumerate(THAI_DIGITS)})


def to_thai_digits(text: str) -> str:
    return text.translate(_TO_THAI)


def to_arabic_digits(text: str) -> str:
    return text.translate(_TO_ARABIC)


def _strip_label(token: str) -> str:
    return _CHANNEL_LABEL_RE.sub("", token, count=1).lstrip()


def _channels_of(chart: Any) -> Sequence[str]:
    if isinstance(chart, Mapping):
        return chart["channelOutputs"]
    channels = getattr(chart, "channel_outputs", None)
    if channels is not None:
        return channels
    return chart


def format_channel_outputs(chart: Any, numerals: str = "arabic") -> List[str]:
    """
    Display form of a chart's 12 channels.

    `chart` may be a CalculationResult, a dict with "channelOutputs" or the
    channel list itself. Arabic output also spells the ascendant as "L".
    """
    if numerals not in NUMERAL_SYSTEMS:
        raise ValueError(f"unsupported numeral system: {numerals!r} (expected 'arabic' or 'thai')")
    out: List[str] = []
    for token in _channels_of(chart):
        text = _strip_label(token)
        if numerals == "thai":
            out.append(to_thai_digits(text))
        else:
            out.append(to_arabic_digits(text).replace(ASCENDANT_SYMBOL, "L"))
    return out
