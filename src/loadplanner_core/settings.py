from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any, Dict, Mapping, Tuple

import yaml

from .units import parse_bool

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "LOADPLANNER_SETTINGS"

STRATEGY_ORDER: Tuple[str, ...] = ("first_fit", "best_fit", "guillotine", "skyline")


@dataclass(frozen=True)
class EngineSettings:
    """Tunables of the placement engine.

    ``grid_step`` trades density against runtime for the grid-scanning
    strategies: halving it roughly quadruples the number of candidate
    positions First-Fit and Best-Fit have to test.
    """

    grid_step: float = 5.0
    epsilon: float = 0.01
    small_gap_threshold: float = 50.0
    rotation_enabled: bool = True
    efficiency_weight: float = 0.7
    compactness_weight: float = 0.3
    strategies: Tuple[str, ...] = STRATEGY_ORDER

    def __post_init__(self) -> None:
        if not self.grid_step > 0:
            raise ValueError(f"grid_step must be positive, got {self.grid_step!r}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be >= 0, got {self.epsilon!r}")
        if self.small_gap_threshold < 0:
            raise ValueError("small_gap_threshold must be >= 0")
        if self.efficiency_weight < 0 or self.compactness_weight < 0:
            raise ValueError("score weights must be >= 0")
        unknown = [name for name in self.strategies if name not in STRATEGY_ORDER]
        if unknown:
            raise ValueError(f"unknown strategies: {', '.join(unknown)}")
        # declared order wins over the order given in the settings file
        ordered = tuple(name for name in STRATEGY_ORDER if name in self.strategies)
        object.__setattr__(self, "strategies", ordered)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EngineSettings":
        return DEFAULT_SETTINGS.merged(data)

    def merged(self, data: Mapping[str, Any]) -> "EngineSettings":
        """Return a copy with known keys from ``data`` applied."""
        known = {f.name: f for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            if key == "strategies":
                if isinstance(value, str):
                    value = [value]
                changes[key] = tuple(str(item) for item in value)
            elif key == "rotation_enabled":
                changes[key] = parse_bool(value)
            else:
                changes[key] = float(value)
        return replace(self, **changes)


DEFAULT_SETTINGS = EngineSettings()


def settings_path() -> str:
    env_path = os.getenv(SETTINGS_ENV_VAR)
    if env_path:
        return os.path.abspath(os.path.expanduser(env_path))
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


@lru_cache(maxsize=None)
def load_settings() -> EngineSettings:
    """Load engine settings from ``settings.yaml`` when available."""

    path = settings_path()
    data: Dict[str, Any] = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("Could not read settings from %s, using defaults", path)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded
        else:
            logger.warning("Settings file %s is not a mapping, using defaults", path)
    return EngineSettings.from_mapping(data)
