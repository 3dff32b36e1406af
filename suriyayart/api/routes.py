# suriyayart/api/routes.py
"""
Suriyayart API routes
- Chart: positions, tanuseth, channels, Sun degree/minute, ruling planets
- Ruling planets from an existing channel list
- Province sunrise offsets
- Ops: /api/health, /api/config

Notes:
- Input keys follow the engine's camelCase names (day, monthTh, yearBe|yearBc, hour, minute, province).
- `numerals` selects the display form of `channels`; `channelOutputs` is always the raw Thai form.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request

from suriyayart.version import VERSION
from suriyayart.utils.config import load_config
from suriyayart.core.ascendant import canonical_province, province_offset, suggest_provinces
from suriyayart.core.chart import INDETERMINATE, generate_thai_astrology_chart
from suriyayart.core.constants import DEFAULT_PROVINCE_OFFSET, PROVINCE_ALIASES, PROVINCE_TIME_OFFSETS
from suriyayart.core.numerals import format_channel_outputs
from suriyayart.core.ruling_planets import RulingPlanetsError, find_ruling_planets, format_ruling_planets
from suriyayart.core.validators import ValidationError, parse_chart_payload, parse_numerals

log = logging.getLogger(__name__)
api = Blueprint("api", __name__)

DEBUG_VERBOSE = os.getenv("SURIYAYART_DEBUG_VERBOSE", "0").lower() in ("1", "true", "yes", "on")


# ───────────────────────── helpers ─────────────────────────
def _json_error(code: str, errors: Any = None, http: int = 400):
    out: Dict[str, Any] = {"ok": False, "error": code}
    if errors is not None:
        out["errors"] = errors
    return jsonify(out), http


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True)
    if not isinstance(body, dict):
        raise ValidationError("payload must be an object")
    return body


def _cfg():
    cfg = getattr(current_app, "cfg", None)
    return cfg if cfg is not None else load_config()


def _met_chart(outcome: str) -> None:
    try:
        from suriyayart.main import MET_CHARTS  # type: ignore
        MET_CHARTS.labels(tanuseth=outcome).inc()
    except Exception:
        pass


def _province_meta(name: str) -> Dict[str, Any]:
    canon = canonical_province(name)
    meta: Dict[str, Any] = {
        "input": name,
        "name": canon,
        "offset_minutes": province_offset(name),
        "known": canon is not None,
    }
    if canon is None and name:
        meta["suggestions"] = suggest_provinces(name)
    return meta


# ───────────────────────── health / ops ─────────────────────────
@api.get("/api/health")
def health():
    return jsonify({"ok": True, "status": "up", "version": VERSION}), 200


@api.get("/api/config")
def config_info():
    cfg = _cfg()
    return jsonify({
        "ok": True,
        "numerals": cfg.numerals,
        "default_province_offset": DEFAULT_PROVINCE_OFFSET,
        "version": VERSION,
    }), 200


# ───────────────────────── provinces ─────────────────────────
@api.get("/api/provinces")
def provinces():
    aliases: Dict[str, List[str]] = {}
    for slug, canon in PROVINCE_ALIASES.items():
        aliases.setdefault(canon, []).append(slug)
    items = [
        {"name": name, "offset_minutes": offset, "aliases": aliases.get(name, [])}
        for name, offset in PROVINCE_TIME_OFFSETS.items()
    ]
    return jsonify({
        "ok": True,
        "count": len(items),
        "default_offset_minutes": DEFAULT_PROVINCE_OFFSET,
        "provinces": items,
    }), 200


# ───────────────────────── chart ─────────────────────────
@api.post("/api/chart")
def chart_endpoint():
    body = _body()
    try:
        inp = parse_chart_payload(body)
        numerals = parse_numerals(body.get("numerals"), default=_cfg().numerals)
    except ValidationError as e:
        return _json_error("validation_error", e.errors(), 422)

    chart = generate_thai_astrology_chart(inp)
    _met_chart("indeterminate" if chart.tanuseth == INDETERMINATE else "determinate")

    out: Dict[str, Any] = {"ok": True, **chart.to_dict()}
    out["channels"] = format_channel_outputs(chart.result, numerals=numerals)
    out["numerals"] = numerals
    out["yearBe"] = inp.resolved_year_be
    out["province"] = _province_meta(inp.province)
    if chart.ruling_planets is not None:
        out["rulingPlanetsSummary"] = format_ruling_planets(chart.ruling_planets)
    if DEBUG_VERBOSE:
        log.info("chart %s → tanuseth=%s", body, chart.tanuseth)
    return jsonify(out), 200


@api.post("/api/ruling-planets")
def ruling_planets_endpoint():
    body = _body()
    channels: Optional[Any] = body.get("channelOutputs", body.get("channels"))
    try:
        info = find_ruling_planets(channels)
    except RulingPlanetsError as e:
        return _json_error("ruling_planets_error", [e.to_dict()], 422)
    return jsonify({
        "ok": True,
        "rulingPlanets": info.to_dict(),
        "summary": format_ruling_planets(info),
    }), 200
