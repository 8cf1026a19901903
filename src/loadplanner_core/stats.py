from __future__ import annotations

from typing import Dict, Hashable, Optional, Sequence

from .metrics import compute_area_efficiency
from .models import Container, PalletInstance, StatsSnapshot


def placed_by_type(instances: Sequence[PalletInstance]) -> Dict[Hashable, int]:
    counts: Dict[Hashable, int] = {}
    for inst in instances:
        counts.setdefault(inst.type_id, 0)
        if inst.placed:
            counts[inst.type_id] += 1
    return counts


def compute_stats(
    instances: Sequence[PalletInstance],
    container: Container,
    execution_time_ms: float,
    strategy: Optional[str] = None,
) -> StatsSnapshot:
    return StatsSnapshot(
        total_pallets=len(instances),
        placed_pallets=sum(1 for inst in instances if inst.placed),
        efficiency=compute_area_efficiency(instances, container),
        execution_time_ms=execution_time_ms,
        strategy=strategy,
        placed_by_type=placed_by_type(instances),
    )
