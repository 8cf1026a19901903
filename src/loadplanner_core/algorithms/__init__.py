from typing import Dict, Type

from .base import PlacementStrategy, StrategyKind
from .best_fit import BestFitStrategy, placement_score
from .first_fit import FirstFitStrategy
from .grid import AnchorGrid, GridStrategy
from .guillotine import GuillotineStrategy, split_free_rectangle
from .skyline import SkylineStrategy, raise_skyline, skyline_height

STRATEGIES: Dict[StrategyKind, Type[PlacementStrategy]] = {
    StrategyKind.FIRST_FIT: FirstFitStrategy,
    StrategyKind.BEST_FIT: BestFitStrategy,
    StrategyKind.GUILLOTINE: GuillotineStrategy,
    StrategyKind.SKYLINE: SkylineStrategy,
}

__all__ = [
    "STRATEGIES",
    "PlacementStrategy",
    "StrategyKind",
    "FirstFitStrategy",
    "BestFitStrategy",
    "GuillotineStrategy",
    "SkylineStrategy",
    "AnchorGrid",
    "GridStrategy",
    "placement_score",
    "split_free_rectangle",
    "raise_skyline",
    "skyline_height",
]
