from __future__ import annotations

from typing import Iterable, List, Sequence

from .models import PalletInstance, PalletType

# Default colours, assigned per pallet type in input order.
COLORS = (
    "#e74c3c",
    "#3498db",
    "#2ecc71",
    "#f39c12",
    "#9b59b6",
    "#1abc9c",
    "#e67e22",
    "#34495e",
    "#16a085",
    "#27ae60",
    "#2980b9",
    "#8e44ad",
)


def expand_instances(
    pallet_types: Iterable[PalletType], palette: Sequence[str] = COLORS
) -> List[PalletInstance]:
    """Turn pallet types into individual instances, largest area first.

    Ties keep the input order, so the result is fully determined by the
    order of ``pallet_types``.

    Examples
    --------
    >>> types = [PalletType("a", 100, 100, 1), PalletType("b", 100, 125, 2)]
    >>> [(inst.type_id, inst.instance_index) for inst in expand_instances(types)]
    [('b', 0), ('b', 1), ('a', 0)]
    """
    instances: List[PalletInstance] = []
    for position, pallet_type in enumerate(pallet_types):
        color = pallet_type.color
        if color is None and palette:
            color = palette[position % len(palette)]
        for index in range(pallet_type.quantity):
            instances.append(
                PalletInstance(
                    type_id=pallet_type.id,
                    instance_index=index,
                    length=pallet_type.length,
                    width=pallet_type.width,
                    color=color,
                    allow_rotation=pallet_type.allow_rotation,
                )
            )
    instances.sort(key=lambda inst: inst.area, reverse=True)
    return instances


def clone_instances(instances: Iterable[PalletInstance]) -> List[PalletInstance]:
    return [inst.clone() for inst in instances]
