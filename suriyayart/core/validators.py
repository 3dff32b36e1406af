# suriyayart/core/validators.py
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

# ───────────────────────── errors ─────────────────────────

class ValidationError(ValueError):
    """Structured input error; `.errors()` lists {"loc", "msg", "type"} entries for the API layer."""
    def __init__(self, details: Union[str, Dict[str, Any], List[Dict[str, Any]]]):
        if isinstance(details, str):
            self._details = [{"loc": [], "msg": details, "type": "value_error"}]
            super().__init__(details)
        elif isinstance(details, dict):
            self._details = [details]
            super().__init__(details.get("msg", "validation_error"))
        elif isinstance(details, list):
            self._details = details
            super().__init__(self._details[0]["msg"] if self._details else "validation_error")
        else:
            self._details = [{"loc": [], "msg": "validation_error", "type": "value_error"}]
            super().__init__("validation_error")

    def errors(self) -> List[Dict[str, Any]]:
        return list(self._details)


# ───────────────────────── helpers ─────────────────────────

def _err(loc: List[str] | str, msg: str, typ: str = "value_error") -> Dict[str, Any]:
    return {"loc": [loc] if isinstance(loc, str) else loc, "msg": msg, "type": typ}

_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

def _as_int(v: Any, field: str, *, lenient_text: bool = False) -> int:
    """
    Integers pass through; integral floats are narrowed; bools and anything
    non-finite or fractional are rejected. Digit strings only when `lenient_text`.
    """
    if isinstance(v, bool) or v is None:
        raise ValidationError(_err(field, f"`{field}` must be a finite integer", "type_error.integer"))
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        if math.isfinite(v) and v.is_integer():
            return int(v)
        raise ValidationError(_err(field, f"`{field}` must be a finite integer", "type_error.integer"))
    if lenient_text and isinstance(v, str) and _INT_RE.match(v):
        return int(v.strip())
    raise ValidationError(_err(field, f"`{field}` must be a finite integer", "type_error.integer"))

def _in_range(v: int, lo: int, hi: int, field: str) -> int:
    if not (lo <= v <= hi):
        raise ValidationError(_err(field, f"`{field}` must be an integer between {lo} and {hi}", "value_error.range"))
    return v


# ───────────────────────── calculation input ─────────────────────────

@dataclass(frozen=True)
class CalculationInput:
    """
    A civil moment in Thai local time plus the province used for the sunrise offset.

    Exactly one of `year_be` / `year_bc` is normally given; when both are present
    they must agree (year_bc + 543 == year_be). Unknown provinces are accepted and
    fall back to the default sunrise offset downstream.
    """
    day: int
    month_th: int
    year_be: Optional[int] = None
    year_bc: Optional[int] = None
    hour: int = 0
    minute: int = 0
    province: str = ""

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        set_(self, "month_th", _in_range(_as_int(self.month_th, "monthTh"), 1, 12, "monthTh"))
        set_(self, "day", _in_range(_as_int(self.day, "day"), 1, 31, "day"))
        set_(self, "hour", _in_range(_as_int(self.hour, "hour"), 0, 23, "hour"))
        set_(self, "minute", _in_range(_as_int(self.minute, "minute"), 0, 59, "minute"))

        if self.year_be is None and self.year_bc is None:
            raise ValidationError(_err(["yearBe", "yearBc"], "Either `yearBe` or `yearBc` must be provided", "value_error.missing"))
        if self.year_be is not None:
            set_(self, "year_be", _as_int(self.year_be, "yearBe"))
        if self.year_bc is not None:
            set_(self, "year_bc", _as_int(self.year_bc, "yearBc"))
        if self.year_be is not None and self.year_bc is not None and self.year_bc + 543 != self.year_be:
            raise ValidationError(_err(["yearBe", "yearBc"], "`yearBe` and `yearBc` disagree (yearBe must equal yearBc + 543)"))

        if self.province is None:
            set_(self, "province", "")
        elif not isinstance(self.province, str):
            raise ValidationError(_err("province", "`province` must be a string", "type_error.str"))

    @property
    def resolved_year_be(self) -> int:
        if self.year_be is not None:
            return self.year_be
        return self.year_bc + 543  # type: ignore[operator]


# ───────────────────────── payload parsing ─────────────────────────

_FIELD_ALIASES = {
    "day": ("day",),
    "month_th": ("monthTh", "month_th", "month"),
    "year_be": ("yearBe", "year_be"),
    "year_bc": ("yearBc", "year_bc"),
    "hour": ("hour",),
    "minute": ("minute",),
    "province": ("province",),
}

def _pick(body: Dict[str, Any], keys) -> Any:
    for k in keys:
        if k in body and body[k] is not None:
            return body[k]
    return None

def parse_chart_payload(body: Dict[str, Any]) -> CalculationInput:
    """
    Normalize a JSON body (camelCase or snake_case keys) into a CalculationInput.

    - `day`, `monthTh`, `hour`, `minute` are required.
    - One of `yearBe` / `yearBc` is required.
    - Integer-looking strings are accepted here (form posts); the core type is stricter.
    - All field problems are collected and raised together.
    """
    if not isinstance(body, dict):
        raise ValidationError("payload must be an object")

    errs: List[Dict[str, Any]] = []
    values: Dict[str, Any] = {}
    for attr, keys in _FIELD_ALIASES.items():
        raw = _pick(body, keys)
        if attr == "province":
            if raw is not None and not isinstance(raw, str):
                errs.append(_err("province", "`province` must be a string", "type_error.str"))
            values[attr] = (raw or "").strip() if isinstance(raw, str) else ""
            continue
        if raw is None:
            if attr in ("year_be", "year_bc"):
                values[attr] = None
                continue
            errs.append(_err(keys[0], f"`{keys[0]}` is required", "value_error.missing"))
            continue
        try:
            values[attr] = _as_int(raw, keys[0], lenient_text=True)
        except ValidationError as e:
            errs.extend(e.errors())

    if values.get("year_be") is None and values.get("year_bc") is None and not any(
        e["loc"] and e["loc"][0] in ("yearBe", "yearBc") for e in errs
    ):
        errs.append(_err(["yearBe", "yearBc"], "Either `yearBe` or `yearBc` must be provided", "value_error.missing"))

    if errs:
        raise ValidationError(errs)
    return CalculationInput(**values)


def parse_numerals(val: Any, default: str = "arabic") -> str:
    s = str(val or default).strip().lower()
    if s not in ("arabic", "thai"):
        raise ValidationError(_err("numerals", "numerals must be 'arabic' or 'thai'", "value_error.numerals"))
    return s
