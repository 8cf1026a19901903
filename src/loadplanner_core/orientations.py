from __future__ import annotations

from typing import List

from .models import Orientation, PalletInstance


def orientations(instance: PalletInstance, rotation_enabled: bool = True) -> List[Orientation]:
    """Allowed footprints of ``instance``: identity first, then the 90° swap."""
    identity = Orientation(instance.length, instance.width, False)
    if (
        not rotation_enabled
        or not instance.allow_rotation
        or instance.length == instance.width
    ):
        return [identity]
    return [identity, Orientation(instance.width, instance.length, True)]
