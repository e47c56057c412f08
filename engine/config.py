"""Lightweight loader for volume configuration toggles."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "engine.json"
_CONFIG_DATA: Optional[Dict[str, Any]] = None


def _load() -> Dict[str, Any]:
    try:
        with _CONFIG_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        print(f"[config] failed to read {_CONFIG_PATH}: {exc}")
        return {}
    if not isinstance(data, dict):
        print(f"[config] ignoring {_CONFIG_PATH}: top level must be an object")
        return {}
    return data


def _ensure_loaded() -> Dict[str, Any]:
    global _CONFIG_DATA
    if _CONFIG_DATA is None:
        _CONFIG_DATA = _load()
    return _CONFIG_DATA


def reload() -> None:
    """Forget cached values; the next ``get`` reads the file again."""
    global _CONFIG_DATA
    _CONFIG_DATA = None


def get(path: str, default: Any = None) -> Any:
    """Return a config value using dotted paths, or default when missing."""
    data = _ensure_loaded()
    if not path:
        return data

    current: Any = data
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current
