# suriyayart/utils/config.py
import os
import yaml

from suriyayart.core.validators import parse_numerals

DEFAULT_CONFIG_PATH = "config/defaults.yaml"

_BUILTIN_DEFAULTS = {
    "numerals": "arabic",
    "cors_allow_origin": "*",
}

class AttrDict(dict):
    """Dict that also supports attribute access: cfg.numerals and cfg['numerals'] both work."""
    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError as e:
            raise AttributeError(item) from e
    def __setattr__(self, key, value):
        self[key] = value

def _to_attr(obj):
    if isinstance(obj, dict):
        return AttrDict({k: _to_attr(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return [_to_attr(x) for x in obj]
    return obj

def config_path() -> str:
    return os.getenv("SURIYAYART_CONFIG", DEFAULT_CONFIG_PATH)

def load_config(path: str = None):
    """
    Load YAML config from `path` (default: $SURIYAYART_CONFIG or config/defaults.yaml)
    on top of the built-in defaults. A missing file leaves the defaults in place.
    Optional override:
      - SURIYAYART_NUMERALS  (overrides config['numerals'] if set)
    An unknown numeral system raises ValidationError here, at startup.
    Returns an AttrDict for convenient access.
    """
    path = path or config_path()
    data = dict(_BUILTIN_DEFAULTS)
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data.update(yaml.safe_load(f) or {})

    numerals = os.getenv("SURIYAYART_NUMERALS")
    if numerals:
        data["numerals"] = numerals
    data["numerals"] = parse_numerals(data.get("numerals"))

    return _to_attr(data)
