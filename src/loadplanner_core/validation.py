from __future__ import annotations

import math
from typing import Any, Iterable, List

from .models import Container, PalletType


class InvalidPlacementInput(ValueError):
    """Raised by :func:`loadplanner_core.place` before any strategy runs."""

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _positive(value: Any) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


def validate_inputs(
    pallet_types: Iterable[PalletType], container: Container, clearance: Any
) -> List[str]:
    errors: List[str] = []
    if not _positive(container.length) or not _positive(container.width):
        errors.append(
            f"Container dimensions must be positive, got "
            f"{container.length!r} x {container.width!r}"
        )
    if not (
        isinstance(clearance, (int, float))
        and math.isfinite(clearance)
        and clearance >= 0
    ):
        errors.append(f"Clearance must be >= 0, got {clearance!r}")
    for pallet_type in pallet_types:
        if not _positive(pallet_type.length) or not _positive(pallet_type.width):
            errors.append(
                f"Pallet {pallet_type.id!r}: dimensions must be positive, got "
                f"{pallet_type.length!r} x {pallet_type.width!r}"
            )
        quantity = pallet_type.quantity
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            errors.append(
                f"Pallet {pallet_type.id!r}: quantity must be an integer >= 0, "
                f"got {quantity!r}"
            )
    return errors
