from __future__ import annotations

from typing import List, Tuple

from ..geometry import can_place
from ..models import Container, FreeRectangle, Orientation, PalletInstance
from ..settings import DEFAULT_SETTINGS, EngineSettings
from ..units import CM
from .base import PlacementStrategy, StrategyKind

_TOL = 1e-9


def split_free_rectangle(
    free: FreeRectangle, used_length: CM, used_width: CM
) -> List[FreeRectangle]:
    """Cut ``free`` around a footprint anchored at its origin.

    The two pieces partition the rest of ``free``: the piece with the larger
    leftover keeps the full extent of ``free`` along its cut, the other one
    is bounded by the footprint.  Pieces without area are dropped.
    """
    fx, fy, fw, fh = free
    used_length = min(used_length, fw)
    used_width = min(used_width, fh)
    right_w = fw - used_length
    top_h = fh - used_width
    if right_w >= top_h:
        right = FreeRectangle(fx + used_length, fy, right_w, fh)
        top = FreeRectangle(fx, fy + used_width, used_length, top_h)
    else:
        right = FreeRectangle(fx + used_length, fy, right_w, used_width)
        top = FreeRectangle(fx, fy + used_width, fw, top_h)
    return [piece for piece in (right, top) if piece.width > _TOL and piece.height > _TOL]


class GuillotineStrategy(PlacementStrategy):
    """Free-rectangle packing with best-short-side-fit selection."""

    kind = StrategyKind.GUILLOTINE

    def __init__(
        self,
        container: Container,
        clearance: CM,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ) -> None:
        super().__init__(container, clearance, settings)
        self.free: List[FreeRectangle] = [
            FreeRectangle(0.0, 0.0, container.length, container.width)
        ]

    def _required(self, free: FreeRectangle, orientation: Orientation) -> Tuple[CM, CM]:
        # trailing clearance is only needed where a neighbour can follow
        need_l = orientation.length
        need_w = orientation.width
        if free.x + free.width < self.container.length - _TOL:
            need_l += self.clearance
        if free.y + free.height < self.container.width - _TOL:
            need_w += self.clearance
        return need_l, need_w

    def place_one(self, instance: PalletInstance) -> bool:
        candidates = []
        for index, free in enumerate(self.free):
            for rank, orientation in enumerate(self.orientations(instance)):
                need_l, need_w = self._required(free, orientation)
                if need_l > free.width + _TOL or need_w > free.height + _TOL:
                    continue
                leftover_l = free.width - need_l
                leftover_w = free.height - need_w
                key = (
                    min(leftover_l, leftover_w),
                    max(leftover_l, leftover_w),
                    free.y,
                    free.x,
                    rank,
                )
                candidates.append((key, index, orientation))
        candidates.sort(key=lambda item: item[0])

        for _, index, orientation in candidates:
            free = self.free[index]
            if not can_place(
                free.x,
                free.y,
                orientation.length,
                orientation.width,
                self.placed,
                self.clearance,
                self.container,
                self.settings.epsilon,
            ):
                continue
            self.commit(instance, free.x, free.y, orientation)
            pieces = split_free_rectangle(
                free,
                orientation.length + self.clearance,
                orientation.width + self.clearance,
            )
            self.free[index : index + 1] = pieces
            return True
        return False
