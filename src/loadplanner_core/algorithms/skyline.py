from __future__ import annotations

from typing import List, Optional, Tuple

from ..geometry import can_place
from ..models import Container, Orientation, PalletInstance, SkylineSegment
from ..settings import DEFAULT_SETTINGS, EngineSettings
from ..units import CM
from .base import PlacementStrategy, StrategyKind

_TOL = 1e-9


def skyline_height(segments: List[SkylineSegment], x: CM, length: CM) -> CM:
    """Resting height for a footprint spanning ``[x, x + length)``."""
    end = x + length
    height = 0.0
    for seg in segments:
        if seg.x >= end - _TOL:
            break
        if seg.x + seg.width > x + _TOL:
            height = max(height, seg.y)
    return height


def raise_skyline(
    segments: List[SkylineSegment], start: CM, end: CM, height: CM
) -> List[SkylineSegment]:
    """Lift ``[start, end)`` to at least ``height`` and merge equal neighbours."""
    lifted: List[SkylineSegment] = []
    for seg in segments:
        s0, s1 = seg.x, seg.x + seg.width
        if s1 <= start + _TOL or s0 >= end - _TOL:
            lifted.append(seg)
            continue
        lo = max(s0, start)
        hi = min(s1, end)
        if lo - s0 > _TOL:
            lifted.append(SkylineSegment(s0, seg.y, lo - s0))
        else:
            lo = s0
        keep_right = s1 - hi > _TOL
        if not keep_right:
            hi = s1
        lifted.append(SkylineSegment(lo, max(seg.y, height), hi - lo))
        if keep_right:
            lifted.append(SkylineSegment(hi, seg.y, s1 - hi))

    merged: List[SkylineSegment] = []
    for seg in lifted:
        if merged and abs(merged[-1].y - seg.y) <= _TOL:
            prev = merged[-1]
            merged[-1] = SkylineSegment(prev.x, prev.y, prev.width + seg.width)
        else:
            merged.append(seg)
    return merged


class SkylineStrategy(PlacementStrategy):
    """Leftmost skyline position, lowest top edge on ties."""

    kind = StrategyKind.SKYLINE

    def __init__(
        self,
        container: Container,
        clearance: CM,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ) -> None:
        super().__init__(container, clearance, settings)
        self.segments: List[SkylineSegment] = [
            SkylineSegment(0.0, 0.0, container.length)
        ]

    def _best_at(self, x: CM, instance: PalletInstance) -> Optional[Tuple[CM, Orientation]]:
        best: Optional[Tuple[CM, Orientation]] = None
        best_top = 0.0
        for orientation in self.orientations(instance):
            if x + orientation.length > self.container.length:
                continue
            y = skyline_height(self.segments, x, orientation.length)
            top = y + orientation.width
            if top > self.container.width:
                continue
            if best is not None and top >= best_top:
                continue
            if can_place(
                x,
                y,
                orientation.length,
                orientation.width,
                self.placed,
                self.clearance,
                self.container,
                self.settings.epsilon,
            ):
                best = (y, orientation)
                best_top = top
        return best

    def place_one(self, instance: PalletInstance) -> bool:
        for seg in self.segments:
            found = self._best_at(seg.x, instance)
            if found is None:
                continue
            y, orientation = found
            x = seg.x
            self.commit(instance, x, y, orientation)
            end = min(x + orientation.length + self.clearance, self.container.length)
            self.segments = raise_skyline(
                self.segments, x, end, y + orientation.width + self.clearance
            )
            return True
        return False
