# suriyayart/core/constants.py
# -*- coding: utf-8 -*-
"""
Suriyayart core constants and small helpers

Purpose
-------
Single source of truth for:
- the body enumeration (symbol, numeral digit, numerology number, Thai name)
- sign rulership chains used by the tanuseth numerology
- quadrant / anomaly interpolation tables
- unequal-house sign durations and province sunrise offsets
- arc-minute wrapping and the integer helpers the almanac arithmetic relies on

Design
------
- Pure-Python, no external dependencies.
- Safe to import from any core module.
- Tables are immutable (tuples, frozen dataclasses, MappingProxyType).

Notes
-----
- Angles are fixed-point arc-minutes: 21600 units = 360°, 1800 units = one sign.
- The almanac tables were tuned against truncating division and a
  sign-preserving remainder; `trunc_div` / `trunc_rem` reproduce that, and
  `round_half_up` rounds .5 toward +∞ (never to even).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple
import math

__all__ = [
    # bodies
    "Body", "BodyInfo", "BODY_INFO", "PLANETARY_BODIES",
    # rulership
    "SIGN_RULER_INDEX", "RULER_INDEX_BODY",
    # tables
    "QUADRANT_ADJUST_TABLE", "SUN_ANOMALY_TABLE", "MOON_ANOMALY_TABLE",
    "SIGN_DURATIONS_MINUTES", "PROVINCE_TIME_OFFSETS", "PROVINCE_ALIASES",
    "DEFAULT_PROVINCE_OFFSET",
    # units
    "FULL_CIRCLE", "SIGN_ARC", "SIGN_COUNT", "MINUTES_PER_DAY",
    # symbols / numerals
    "ASCENDANT_SYMBOL", "THAI_DIGITS",
    # helpers
    "wrap_arcmin", "round_half_up", "trunc_div", "trunc_rem",
]

# ── units ─────────────────────────────────────────────────────────────────────
FULL_CIRCLE: Final[int] = 21600   # arc-minutes in 360°
SIGN_ARC: Final[int] = 1800       # arc-minutes in one sign (30°)
SIGN_COUNT: Final[int] = 12
MINUTES_PER_DAY: Final[int] = 1440

# ── symbols / numerals ───────────────────────────────────────────────────────
ASCENDANT_SYMBOL: Final[str] = "ลั"
THAI_DIGITS: Final[Tuple[str, ...]] = ("๐", "๑", "๒", "๓", "๔", "๕", "๖", "๗", "๘", "๙")


# ── bodies ───────────────────────────────────────────────────────────────────
class Body(str, Enum):
    """The ascendant plus the ten bodies, in channel-encoding order."""
    ASCENDANT = "ascendant"
    SUN = "sun"
    MOON = "moon"
    MARS = "mars"
    MERCURY = "mercury"
    JUPITER = "jupiter"
    VENUS = "venus"
    SATURN = "saturn"
    RAHU = "rahu"
    KETU = "ketu"
    URANUS = "uranus"

    @property
    def info(self) -> "BodyInfo":
        return BODY_INFO[self]

    @property
    def symbol(self) -> str:
        return BODY_INFO[self].symbol

    @property
    def digit(self) -> Optional[int]:
        return BODY_INFO[self].digit

    @property
    def tanuseth_number(self) -> Optional[int]:
        return BODY_INFO[self].tanuseth_number

    @property
    def thai_name(self) -> str:
        return BODY_INFO[self].thai_name


@dataclass(frozen=True)
class BodyInfo:
    symbol: str                     # glyph written into a channel slot
    digit: Optional[int]            # numeral carried by the glyph (None for the ascendant)
    tanuseth_number: Optional[int]  # numerology digit 1..7, marked with "*" when it matches
    thai_name: str


BODY_INFO: Final[Mapping[Body, BodyInfo]] = MappingProxyType({
    Body.ASCENDANT: BodyInfo("ลั", None, None, "ลัคนา"),
    Body.SUN:       BodyInfo("๑", 1, 1, "อาทิตย์"),
    Body.MOON:      BodyInfo("๒", 2, 2, "จันทร์"),
    Body.MARS:      BodyInfo("๓", 3, 3, "อังคาร"),
    Body.MERCURY:   BodyInfo("๔", 4, 4, "พุธ"),
    Body.JUPITER:   BodyInfo("๕", 5, 5, "พฤหัสบดี"),
    Body.VENUS:     BodyInfo("๖", 6, 6, "ศุกร์"),
    Body.SATURN:    BodyInfo("๗", 7, 7, "เสาร์"),
    Body.RAHU:      BodyInfo("๘", 8, None, "ราหู"),
    Body.KETU:      BodyInfo("๙", 9, None, "เกตุ"),
    Body.URANUS:    BodyInfo("๐", 0, None, "มฤตยู"),
})

# Everything except the ascendant (which is derived from the Sun, not modelled).
PLANETARY_BODIES: Final[Tuple[Body, ...]] = tuple(b for b in Body if b is not Body.ASCENDANT)

# ── rulership ────────────────────────────────────────────────────────────────
# sign index → ruler index (the ruler index is the numeral on the ruler's glyph)
SIGN_RULER_INDEX: Final[Mapping[int, int]] = MappingProxyType({
    0: 3, 1: 6, 2: 4, 3: 2, 4: 1, 5: 4,
    6: 6, 7: 3, 8: 5, 9: 7, 10: 8, 11: 5,
})

RULER_INDEX_BODY: Final[Mapping[int, Body]] = MappingProxyType({
    info.digit: body for body, info in BODY_INFO.items() if info.digit is not None
})

# ── interpolation tables ─────────────────────────────────────────────────────
# One quarter of the equation-of-center curve at 1800-unit steps.
QUADRANT_ADJUST_TABLE: Final[Tuple[int, ...]] = (0, 244, 427, 488)

# Sun / Moon anomaly corrections at 900-unit steps (arc-minutes).
SUN_ANOMALY_TABLE: Final[Tuple[int, ...]] = (0, 35, 67, 94, 116, 129, 134)
MOON_ANOMALY_TABLE: Final[Tuple[int, ...]] = (0, 77, 148, 209, 256, 286, 296)

# ── ascendant ────────────────────────────────────────────────────────────────
# Rising time of each sign in clock minutes; sums to one day.
SIGN_DURATIONS_MINUTES: Final[Tuple[float, ...]] = (
    120.0, 96.0, 72.0, 120.0, 144.0, 168.0,
    168.0, 144.0, 120.0, 72.0, 96.0, 120.0,
)

DEFAULT_PROVINCE_OFFSET: Final[int] = 18

# Minutes after 06:00 at which the sun rises, per province.
PROVINCE_TIME_OFFSETS: Final[Mapping[str, int]] = MappingProxyType({
    "กระบี่": 24,
    "กรุงเทพมหานคร": 18,
    "กาญจนบุรี": 22,
    "กาฬสินธุ์": 6,
    "กำแพงเพชร": 22,
    "ขอนแก่น": 9,
    "จันทบุรี": 12,
    "ฉะเชิงเทรา": 16,
    "ชลบุรี": 16,
    "ชัยนาท": 19,
    "ชัยภูมิ": 12,
    "ชุมพร": 23,
    "เชียงราย": 21,
    "เชียงใหม่": 24,
    "ตรัง": 22,
    "ตราด": 10,
    "ตาก": 23,
    "นครนายก": 15,
    "นครปฐม": 20,
    "นครพนม": 1,
    "นครราชสีมา": 12,
    "นครศรีธรรมราช": 20,
    "นครสวรรค์": 20,
    "นนทบุรี": 18,
    "นราธิวาส": 13,
    "น่าน": 17,
    "บึงกาฬ": 5,
    "บุรีรัมย์": 8,
    "ปทุมธานี": 18,
    "ประจวบคีรีขันธ์": 21,
    "ปราจีนบุรี": 15,
    "ปัตตานี": 15,
    "พระนครศรีอยุธยา": 18,
    "พะเยา": 20,
    "พังงา": 26,
    "พัทลุง": 20,
    "พิจิตร": 19,
    "พิษณุโลก": 19,
    "เพชรบุรี": 20,
    "เพชรบูรณ์": 15,
    "แพร่": 19,
    "ภูเก็ต": 27,
    "มหาสารคาม": 7,
    "มุกดาหาร": 1,
    "แม่ฮ่องสอน": 28,
    "ยโสธร": 3,
    "ยะลา": 15,
    "ร้อยเอ็ด": 5,
    "ระนอง": 26,
    "ระยอง": 15,
    "ราชบุรี": 21,
    "ลพบุรี": 17,
    "ลำปาง": 22,
    "ลำพูน": 24,
    "เลย": 13,
    "ศรีสะเกษ": 3,
    "สกลนคร": 3,
    "สงขลา": 18,
    "สตูล": 20,
    "สมุทรปราการ": 18,
    "สมุทรสงคราม": 20,
    "สมุทรสาคร": 19,
    "สระแก้ว": 12,
    "สระบุรี": 16,
    "สิงห์บุรี": 18,
    "สุโขทัย": 21,
    "สุพรรณบุรี": 20,
    "สุราษฎร์ธานี": 23,
    "สุรินทร์": 6,
    "หนองคาย": 9,
    "หนองบัวลำภู": 10,
    "อ่างทอง": 18,
    "อำนาจเจริญ": 1,
    "อุดรธานี": 9,
    "อุตรดิตถ์": 20,
    "อุทัยธานี": 20,
    "อุบลราชธานี": 1,
})

# Romanized names (slug form: lowercase, alphanumerics only) → canonical Thai key.
PROVINCE_ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    "krabi": "กระบี่",
    "bangkok": "กรุงเทพมหานคร",
    "krungthepmahanakhon": "กรุงเทพมหานคร",
    "kanchanaburi": "กาญจนบุรี",
    "kalasin": "กาฬสินธุ์",
    "kamphaengphet": "กำแพงเพชร",
    "khonkaen": "ขอนแก่น",
    "chanthaburi": "จันทบุรี",
    "chachoengsao": "ฉะเชิงเทรา",
    "chonburi": "ชลบุรี",
    "chainat": "ชัยนาท",
    "chaiyaphum": "ชัยภูมิ",
    "chumphon": "ชุมพร",
    "chiangrai": "เชียงราย",
    "chiangmai": "เชียงใหม่",
    "trang": "ตรัง",
    "trat": "ตราด",
    "tak": "ตาก",
    "nakhonnayok": "นครนายก",
    "nakhonpathom": "นครปฐม",
    "nakhonphanom": "นครพนม",
    "nakhonratchasima": "นครราชสีมา",
    "korat": "นครราชสีมา",
    "nakhonsithammarat": "นครศรีธรรมราช",
    "nakhonsawan": "นครสวรรค์",
    "nonthaburi": "นนทบุรี",
    "narathiwat": "นราธิวาส",
    "nan": "น่าน",
    "buengkan": "บึงกาฬ",
    "buriram": "บุรีรัมย์",
    "pathumthani": "ปทุมธานี",
    "prachuapkhirikhan": "ประจวบคีรีขันธ์",
    "prachinburi": "ปราจีนบุรี",
    "pattani": "ปัตตานี",
    "phranakhonsiayutthaya": "พระนครศรีอยุธยา",
    "ayutthaya": "พระนครศรีอยุธยา",
    "phayao": "พะเยา",
    "phangnga": "พังงา",
    "phatthalung": "พัทลุง",
    "phichit": "พิจิตร",
    "phitsanulok": "พิษณุโลก",
    "phetchaburi": "เพชรบุรี",
    "phetchabun": "เพชรบูรณ์",
    "phrae": "แพร่",
    "phuket": "ภูเก็ต",
    "mahasarakham": "มหาสารคาม",
    "mukdahan": "มุกดาหาร",
    "maehongson": "แม่ฮ่องสอน",
    "yasothon": "ยโสธร",
    "yala": "ยะลา",
    "roiet": "ร้อยเอ็ด",
    "ranong": "ระนอง",
    "rayong": "ระยอง",
    "ratchaburi": "ราชบุรี",
    "lopburi": "ลพบุรี",
    "lampang": "ลำปาง",
    "lamphun": "ลำพูน",
    "loei": "เลย",
    "sisaket": "ศรีสะเกษ",
    "sakonnakhon": "สกลนคร",
    "songkhla": "สงขลา",
    "satun": "สตูล",
    "samutprakan": "สมุทรปราการ",
    "samutsongkhram": "สมุทรสงคราม",
    "samutsakhon": "สมุทรสาคร",
    "sakaeo": "สระแก้ว",
    "saraburi": "สระบุรี",
    "singburi": "สิงห์บุรี",
    "sukhothai": "สุโขทัย",
    "suphanburi": "สุพรรณบุรี",
    "suratthani": "สุราษฎร์ธานี",
    "surin": "สุรินทร์",
    "nongkhai": "หนองคาย",
    "nongbualamphu": "หนองบัวลำภู",
    "angthong": "อ่างทอง",
    "amnatcharoen": "อำนาจเจริญ",
    "udonthani": "อุดรธานี",
    "uttaradit": "อุตรดิตถ์",
    "uthaithani": "อุทัยธานี",
    "ubonratchathani": "อุบลราชธานี",
})


# ── tiny helpers (no external imports) ────────────────────────────────────────
def wrap_arcmin(value: int | float) -> int | float:
    """
    Wrap arc-minutes into [0, 21600).
    """
    return value % FULL_CIRCLE


def round_half_up(x: float) -> int:
    """
    Round to the nearest integer, halves toward +∞ (2.5 → 3, -2.5 → -2).
    """
    f = math.floor(x)
    return f + 1 if x - f >= 0.5 else f


def trunc_div(a: int, b: int) -> int:
    """
    Integer division truncated toward zero (-7 / 2 → -3).
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_rem(a: int, b: int) -> int:
    """
    Remainder carrying the sign of the dividend (-7 rem 12 → -7).
    """
    return a - b * trunc_div(a, b)
