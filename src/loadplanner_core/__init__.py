"""2D container floor loading: place pallets with clearance, keep the best layout."""

from .containers import CONTAINER_PRESETS, container_preset
from .engine import PlacementRun, place
from .expansion import clone_instances, expand_instances
from .geometry import can_place, fits, overlaps
from .metrics import compute_area_efficiency, compute_compactness, evaluate_placement
from .models import (
    Container,
    Orientation,
    PalletInstance,
    PalletType,
    StatsSnapshot,
    StrategyOutcome,
)
from .orientations import orientations
from .selector import StrategySelector
from .settings import DEFAULT_SETTINGS, EngineSettings, load_settings
from .validation import InvalidPlacementInput

__all__ = [
    "CONTAINER_PRESETS",
    "container_preset",
    "place",
    "PlacementRun",
    "expand_instances",
    "clone_instances",
    "overlaps",
    "fits",
    "can_place",
    "orientations",
    "evaluate_placement",
    "compute_area_efficiency",
    "compute_compactness",
    "Container",
    "Orientation",
    "PalletInstance",
    "PalletType",
    "StatsSnapshot",
    "StrategyOutcome",
    "StrategySelector",
    "EngineSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "InvalidPlacementInput",
]
