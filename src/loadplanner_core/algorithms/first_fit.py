from __future__ import annotations

from ..models import PalletInstance
from .base import StrategyKind
from .grid import GridStrategy


class FirstFitStrategy(GridStrategy):
    """Lowest row, then leftmost column, for the first orientation that fits."""

    kind = StrategyKind.FIRST_FIT

    def place_one(self, instance: PalletInstance) -> bool:
        for orientation in self.orientations(instance):
            position = self.anchor_grid(orientation).first()
            if position is not None:
                x, y = position
                self.commit(instance, x, y, orientation)
                return True
        return False
