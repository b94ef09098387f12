# quickpass/config.py
"""
Application settings for QuickPass.
Settings saved as JSON in %APPDATA%/QuickPass/config.json (Windows) or ~/.quickpass/config.json (fallback).
QUICKPASS_HOME overrides the directory.
The password configuration itself is never stored here.
"""

import os
import json
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "copied_indicator_seconds": 2.0,
    "clipboard_clear_seconds": 20,
    "log_level": "WARNING",
}

def _appdata_dir() -> str:
    override = os.getenv("QUICKPASS_HOME")
    appdata = os.getenv("APPDATA")
    if override:
        d = override
    elif appdata:
        d = os.path.join(appdata, "QuickPass")
    else:
        d = os.path.join(os.path.expanduser("~"), ".quickpass")
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
        logger.warning("could not read settings from %s, using defaults: %s", p, e)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    if isinstance(data, dict):
        out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
