from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .expansion import expand_instances
from .models import (
    Container,
    PalletType,
    PlacementResult,
    StatsSnapshot,
    StrategyOutcome,
)
from .selector import StrategySelector
from .settings import EngineSettings, load_settings
from .signature import placement_signature
from .stats import compute_stats
from .units import CM, format_percent
from .validation import InvalidPlacementInput, validate_inputs

logger = logging.getLogger(__name__)


@dataclass
class PlacementRun:
    placements: PlacementResult
    stats: StatsSnapshot
    outcomes: List[StrategyOutcome] = field(default_factory=list)
    score: float = 0.0

    @property
    def scores(self) -> Dict[str, float]:
        return {outcome.kind: outcome.score for outcome in self.outcomes}

    @property
    def signature(self) -> tuple:
        return placement_signature(self.placements)


def place(
    pallet_types: Iterable[PalletType],
    container: Container,
    clearance_distance: CM,
    *,
    settings: Optional[EngineSettings] = None,
) -> PlacementRun:
    """Place as many pallets as possible on the container floor.

    Every enabled strategy runs on its own copy of the expanded instances
    and the highest-scoring placement is returned.  Invalid input raises
    :class:`InvalidPlacementInput`; a run that places nothing is not an
    error, check ``stats.placed_pallets``.
    """
    start = time.perf_counter()
    pallet_types = list(pallet_types)
    errors = validate_inputs(pallet_types, container, clearance_distance)
    if errors:
        raise InvalidPlacementInput(errors)
    if settings is None:
        settings = load_settings()

    instances = expand_instances(pallet_types)
    logger.info(
        "Placing %d pallets on %sx%s with clearance %s",
        len(instances),
        container.length,
        container.width,
        clearance_distance,
    )

    selector = StrategySelector(container, clearance_distance, settings)
    best_name, placements, score, outcomes = selector.best(instances)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    stats = compute_stats(placements, container, elapsed_ms, best_name)
    logger.info(
        "Placed %d/%d pallets with %s (efficiency %s) in %.2f ms",
        stats.placed_pallets,
        stats.total_pallets,
        best_name or "no strategy",
        format_percent(stats.efficiency),
        elapsed_ms,
    )
    return PlacementRun(placements, stats, outcomes, score)
