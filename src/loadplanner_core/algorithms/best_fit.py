from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np

from ..models import Container, Orientation, PalletInstance
from ..units import CM
from .base import StrategyKind
from .grid import GridStrategy


def placement_score(
    x,
    y,
    length: CM,
    width: CM,
    container: Container,
    small_gap_threshold: float = 50.0,
):
    """Lower is better: distance from the origin plus a sliver penalty.

    Right and top gaps narrower than ``small_gap_threshold`` are unlikely
    to take another pallet, so each of them costs twice its size.  ``x``
    and ``y`` may be scalars or arrays of anchors.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    distance = np.sqrt(x * x + y * y)
    gap_right = container.length - (x + length)
    gap_top = container.width - (y + width)
    penalty = np.where(gap_right < small_gap_threshold, gap_right * 2, 0.0) + np.where(
        gap_top < small_gap_threshold, gap_top * 2, 0.0
    )
    return distance + penalty


class BestFitStrategy(GridStrategy):
    kind = StrategyKind.BEST_FIT

    def place_one(self, instance: PalletInstance) -> bool:
        best: Optional[Tuple[CM, CM, Orientation]] = None
        best_score = math.inf
        for orientation in self.orientations(instance):
            xs, ys = self.anchor_grid(orientation).candidates()
            if not xs.size:
                continue
            scores = placement_score(
                xs,
                ys,
                orientation.length,
                orientation.width,
                self.container,
                self.settings.small_gap_threshold,
            )
            # argmin keeps the first anchor in scan order on ties
            k = int(np.argmin(scores))
            if scores[k] < best_score:
                best_score = float(scores[k])
                best = (float(xs[k]), float(ys[k]), orientation)
        if best is None:
            return False
        x, y, orientation = best
        self.commit(instance, x, y, orientation)
        return True
