from __future__ import annotations

from typing import Sequence, Set

from .geometry import EPSILON, fits, overlaps
from .models import Container, PalletInstance
from .units import CM


def placement_flags(
    instances: Sequence[PalletInstance],
    container: Container,
    clearance: CM,
    epsilon: float = EPSILON,
) -> Set[str]:
    """Names of the placement invariants ``instances`` violate."""
    flags: Set[str] = set()

    keys = [inst.key for inst in instances]
    if len(keys) != len(set(keys)):
        flags.add("duplicate_instance")

    placed = [inst for inst in instances if inst.placed]
    for inst in placed:
        if not fits(inst.x, inst.y, inst.final_length, inst.final_width, container):
            flags.add("out_of_bounds")
        identity = (inst.final_length, inst.final_width) == (inst.length, inst.width)
        swapped = (inst.final_length, inst.final_width) == (inst.width, inst.length)
        if not (identity or swapped):
            flags.add("resized")
        elif inst.rotated and not swapped:
            flags.add("rotation_mismatch")
        elif not inst.rotated and not identity:
            flags.add("rotation_mismatch")

    for i, a in enumerate(placed):
        rect_a = a.footprint()
        for b in placed[i + 1 :]:
            if overlaps(rect_a, b.footprint(), clearance, epsilon):
                flags.add("overlap")
                break
        if "overlap" in flags:
            break

    return flags


def is_valid_placement(
    instances: Sequence[PalletInstance],
    container: Container,
    clearance: CM,
    epsilon: float = EPSILON,
) -> bool:
    return not placement_flags(instances, container, clearance, epsilon)
