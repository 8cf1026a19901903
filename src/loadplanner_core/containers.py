from __future__ import annotations

from typing import Dict

from .models import Container

# Inner floor dimensions in cm.
CONTAINER_PRESETS: Dict[str, Container] = {
    "20ft": Container(length=589.8, width=235.0),
    "40ft": Container(length=1203.2, width=235.0),
    "40HQ": Container(length=1203.2, width=235.0),
}

DISPLAY_MAP = {
    "20ft": "20ft container",
    "40ft": "40ft container",
    "40HQ": "40ft high cube",
}


def container_preset(name: str) -> Container:
    try:
        return CONTAINER_PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(CONTAINER_PRESETS))
        raise ValueError(f"Unknown container {name!r} (known: {known})") from None


def display_for_key(key: str) -> str:
    return DISPLAY_MAP.get(key, key)
