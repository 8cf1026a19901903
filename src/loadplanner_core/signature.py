from __future__ import annotations

from typing import Sequence

from .models import PalletInstance


def placement_signature(instances: Sequence[PalletInstance], eps: float = 1e-6) -> tuple:
    """Hashable snapshot of a placement, stable under float noise below ``eps``."""

    def snap(value: float) -> float:
        return round(value / eps) * eps

    return tuple(
        (
            inst.type_id,
            inst.instance_index,
            inst.placed,
            inst.rotated,
            snap(inst.x),
            snap(inst.y),
            snap(inst.final_length),
            snap(inst.final_width),
        )
        for inst in instances
    )
