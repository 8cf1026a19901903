from __future__ import annotations

import math
from typing import Dict, Iterable, Optional, Tuple

import numpy as np

from ..models import Container, Orientation, PalletInstance, PlacedRect
from ..settings import DEFAULT_SETTINGS, EngineSettings
from ..units import CM
from .base import PlacementStrategy

_TOL = 1e-9


def grid_steps(span: float, step: float) -> int:
    """Index of the last grid position inside ``span`` (-1 if none)."""
    if span < 0:
        return -1
    return int(math.floor(span / step + _TOL))


class AnchorGrid:
    """Grid positions where one footprint can be placed.

    Anchors sit at ``k * step``.  ``valid`` is indexed ``[row, column]`` so
    row-major order is the scan order: lowest row first, then leftmost
    column.  Placed rectangles are blocked out with the same comparisons as
    :func:`loadplanner_core.geometry.overlaps`, one numpy pass per call.
    """

    def __init__(
        self,
        length: CM,
        width: CM,
        container: Container,
        clearance: CM,
        step: float,
        epsilon: float,
    ) -> None:
        self.length = length
        self.width = width
        self.clearance = clearance
        self.epsilon = epsilon
        self.xs = np.arange(grid_steps(container.length - length, step) + 1) * step
        self.ys = np.arange(grid_steps(container.width - width, step) + 1) * step
        self.valid = np.outer(
            self.ys + width <= container.width,
            self.xs + length <= container.length,
        )

    def block(self, rects: Iterable[PlacedRect]) -> None:
        boxes = np.asarray(list(rects), dtype=np.float64).reshape(-1, 4)
        if not len(boxes) or not self.valid.any():
            return
        px, py, pl, pw = boxes.T
        c, eps = self.clearance, self.epsilon
        xs = self.xs[:, None]
        ys = self.ys[:, None]
        cols = (xs + self.length + c > px + eps) & (px + pl + c > xs + eps)
        rows = (ys + self.width + c > py + eps) & (py + pw + c > ys + eps)
        # a cell is blocked when one rectangle hits both its row and column
        hits = rows.astype(np.float64) @ cols.astype(np.float64).T
        self.valid &= hits == 0

    def first(self) -> Optional[Tuple[CM, CM]]:
        if not self.valid.any():
            return None
        row, col = np.unravel_index(int(np.argmax(self.valid)), self.valid.shape)
        return float(self.xs[col]), float(self.ys[row])

    def candidates(self) -> Tuple[np.ndarray, np.ndarray]:
        """``x`` and ``y`` of every valid anchor, in scan order."""
        rows, cols = np.nonzero(self.valid)
        return self.xs[cols], self.ys[rows]


class GridStrategy(PlacementStrategy):
    """Base for strategies that pick among grid anchors.

    One :class:`AnchorGrid` is kept per footprint and updated on every
    commit, so each placement costs a few array operations instead of a
    collision scan per candidate.
    """

    def __init__(
        self,
        container: Container,
        clearance: CM,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ) -> None:
        super().__init__(container, clearance, settings)
        self.grids: Dict[Tuple[CM, CM], AnchorGrid] = {}

    def anchor_grid(self, orientation: Orientation) -> AnchorGrid:
        key = (orientation.length, orientation.width)
        grid = self.grids.get(key)
        if grid is None:
            grid = AnchorGrid(
                orientation.length,
                orientation.width,
                self.container,
                self.clearance,
                self.settings.grid_step,
                self.settings.epsilon,
            )
            grid.block(self.placed)
            self.grids[key] = grid
        return grid

    def commit(
        self, instance: PalletInstance, x: CM, y: CM, orientation: Orientation
    ) -> PlacedRect:
        rect = super().commit(instance, x, y, orientation)
        for grid in self.grids.values():
            grid.block([rect])
        return rect
