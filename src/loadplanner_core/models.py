from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Hashable, List, NamedTuple, Optional

from .units import CM


@dataclass(frozen=True)
class Container:
    """Container floor; height is not used by the 2D engine."""

    length: CM
    width: CM

    @property
    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class PalletType:
    """Pallet definition as entered by the caller."""

    id: Hashable
    length: CM
    width: CM
    quantity: int
    allow_rotation: bool = True
    color: Optional[str] = None


class Orientation(NamedTuple):
    length: CM
    width: CM
    rotated: bool


class PlacedRect(NamedTuple):
    x: CM
    y: CM
    length: CM
    width: CM


class FreeRectangle(NamedTuple):
    """Unused area for guillotine packing (width along container length)."""

    x: CM
    y: CM
    width: CM
    height: CM


class SkylineSegment(NamedTuple):
    x: CM
    y: CM
    width: CM


@dataclass
class PalletInstance:
    """One physical pallet derived from a :class:`PalletType`."""

    type_id: Hashable
    instance_index: int
    length: CM
    width: CM
    color: Optional[str] = None
    allow_rotation: bool = True
    placed: bool = False
    x: CM = 0.0
    y: CM = 0.0
    final_length: Optional[CM] = None
    final_width: Optional[CM] = None
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.final_length is None:
            self.final_length = self.length
        if self.final_width is None:
            self.final_width = self.width

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def key(self) -> tuple:
        return (self.type_id, self.instance_index)

    def clone(self) -> "PalletInstance":
        return replace(self)

    def place(self, x: CM, y: CM, orientation: Orientation) -> PlacedRect:
        self.placed = True
        self.x = x
        self.y = y
        self.final_length = orientation.length
        self.final_width = orientation.width
        self.rotated = orientation.rotated
        return self.footprint()

    def footprint(self) -> PlacedRect:
        return PlacedRect(self.x, self.y, self.final_length, self.final_width)


PlacementResult = List[PalletInstance]


@dataclass
class StrategyOutcome:
    """Result of one strategy run; ``error`` is set when the run failed."""

    kind: str
    instances: PlacementResult
    score: float = 0.0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def placed_count(self) -> int:
        return sum(1 for inst in self.instances if inst.placed)


@dataclass(frozen=True)
class StatsSnapshot:
    total_pallets: int
    placed_pallets: int
    efficiency: float
    execution_time_ms: float
    strategy: Optional[str] = None
    placed_by_type: Dict[Hashable, int] = field(default_factory=dict)

    @property
    def unplaced_pallets(self) -> int:
        return self.total_pallets - self.placed_pallets
