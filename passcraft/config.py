# passcraft/config.py
"""
Simple settings persistence for passcraft.
Settings saved as JSON in %APPDATA%/Passcraft/config.json (Windows) or ~/.passcraft/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any, Tuple

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "min_length": 4,   # bounds the caller enforces, the generator itself only needs length >= classes
    "max_length": 32,
    "classes": ["upper", "lower", "digit", "symbol"],
    "copies": 1,
    "allow_insecure_fallback": True,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "Passcraft")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passcraft")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    for key, value in data.items():
        out[key] = _checked(p, key, value)
    return out

def _checked(p: str, key: str, value: Any) -> Any:
    """Return `value` with the type of DEFAULTS[key], or the default if it can't be converted."""
    if key not in DEFAULTS:
        return value
    default = DEFAULTS[key]
    if isinstance(value, str) and not isinstance(default, str):
        try:
            return coerce_value(key, value)
        except ValueError:
            pass
    elif isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(default, int):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif isinstance(default, list):
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return value
    elif isinstance(value, type(default)):
        return value
    log.warning("ignoring %s=%r in %s: expected %s", key, value, p, type(default).__name__)
    return default

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    tmp = p + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    # atomic replace
    os.replace(tmp, p)

def length_bounds(cfg: Dict[str, Any]) -> Tuple[int, int]:
    lo = int(cfg.get("min_length", DEFAULTS["min_length"]))
    hi = int(cfg.get("max_length", DEFAULTS["max_length"]))
    if lo > hi:
        raise ValueError(f"min_length ({lo}) is greater than max_length ({hi})")
    return lo, hi

def coerce_value(key: str, raw: str) -> Any:
    """Convert a command-line string to the type of DEFAULTS[key]."""
    if key not in DEFAULTS:
        raise KeyError(key)
    default = DEFAULTS[key]
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"{key} expects true/false, got {raw!r}")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, list):
        return [part.strip() for part in raw.split(",") if part.strip()]
    return raw

def check_settings(cfg: Dict[str, Any]) -> None:
    """Raise ValueError if the settings are inconsistent."""
    lo, hi = length_bounds(cfg)
    length = cfg.get("length", DEFAULTS["length"])
    if not lo <= length <= hi:
        raise ValueError(f"length must be between {lo} and {hi}, got {length}")
    if cfg.get("copies", DEFAULTS["copies"]) < 1:
        raise ValueError("copies must be at least 1")
