from __future__ import annotations

from enum import Enum
from typing import List

from ..models import Container, Orientation, PalletInstance, PlacedRect, PlacementResult
from ..orientations import orientations
from ..settings import DEFAULT_SETTINGS, EngineSettings
from ..units import CM


class StrategyKind(str, Enum):
    FIRST_FIT = "first_fit"
    BEST_FIT = "best_fit"
    GUILLOTINE = "guillotine"
    SKYLINE = "skyline"


class PlacementStrategy:
    """Place instances one by one; each instance is visited exactly once.

    Subclasses implement :meth:`place_one` and keep whatever search state
    they need between calls on ``self``.  A strategy object is created per
    run, so that state never leaks between runs.
    """

    kind: StrategyKind

    def __init__(
        self,
        container: Container,
        clearance: CM,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ) -> None:
        self.container = container
        self.clearance = clearance
        self.settings = settings
        self.placed: List[PlacedRect] = []

    def orientations(self, instance: PalletInstance) -> List[Orientation]:
        return orientations(instance, self.settings.rotation_enabled)

    def commit(self, instance: PalletInstance, x: CM, y: CM, orientation: Orientation) -> PlacedRect:
        rect = instance.place(x, y, orientation)
        self.placed.append(rect)
        return rect

    def place_one(self, instance: PalletInstance) -> bool:
        raise NotImplementedError

    def run(self, instances: PlacementResult) -> PlacementResult:
        for instance in instances:
            self.place_one(instance)
        return instances
