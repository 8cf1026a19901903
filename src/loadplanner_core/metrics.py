from __future__ import annotations

import math
from typing import Iterable, List

import numpy as np

from .geometry import rect_area, rect_center
from .models import Container, PalletInstance


def placed_instances(instances: Iterable[PalletInstance]) -> List[PalletInstance]:
    return [inst for inst in instances if inst.placed]


def compute_area_efficiency(
    instances: Iterable[PalletInstance], container: Container
) -> float:
    placed = placed_instances(instances)
    if not placed or container.area <= 0:
        return 0.0
    used = sum(rect_area(inst.footprint()) for inst in placed)
    return used / container.area


def compute_compactness(
    instances: Iterable[PalletInstance], container: Container
) -> float:
    """1 minus the mean pairwise centre distance over the container diagonal."""
    placed = placed_instances(instances)
    if len(placed) < 2:
        return 1.0
    centers = np.array([rect_center(inst.footprint()) for inst in placed], dtype=float)
    deltas = centers[:, None, :] - centers[None, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=-1))
    upper = np.triu_indices(len(placed), k=1)
    mean_distance = float(distances[upper].mean())
    max_distance = math.hypot(container.length, container.width)
    if max_distance <= 0:
        return 0.0
    return 1.0 - mean_distance / max_distance


def evaluate_placement(
    instances: Iterable[PalletInstance],
    container: Container,
    efficiency_weight: float = 0.7,
    compactness_weight: float = 0.3,
) -> float:
    placed = placed_instances(instances)
    if not placed:
        return 0.0
    efficiency = compute_area_efficiency(placed, container)
    compactness = compute_compactness(placed, container)
    return efficiency_weight * efficiency + compactness_weight * compactness
