from __future__ import annotations

from typing import Iterable, Optional

from .models import Container, PlacedRect
from .units import CM

EPSILON = 0.01


def overlaps(
    a: PlacedRect, b: PlacedRect, clearance: CM = 0.0, epsilon: float = EPSILON
) -> bool:
    """Return ``True`` when ``a`` and ``b`` are closer than ``clearance``.

    Rectangles are separated when the gap along x or y is at least
    ``clearance``; ``epsilon`` absorbs rounding at exact contact.  Sizes are
    never inflated, the clearance only widens the separation test.
    """
    ax, ay, al, aw = a
    bx, by, bl, bw = b
    return not (
        ax + al + clearance <= bx + epsilon
        or bx + bl + clearance <= ax + epsilon
        or ay + aw + clearance <= by + epsilon
        or by + bw + clearance <= ay + epsilon
    )


def fits(x: CM, y: CM, length: CM, width: CM, container: Container) -> bool:
    return not (
        x < 0
        or y < 0
        or x + length > container.length
        or y + width > container.width
    )


def find_collision(
    candidate: PlacedRect,
    placed: Iterable[PlacedRect],
    clearance: CM = 0.0,
    epsilon: float = EPSILON,
) -> Optional[PlacedRect]:
    """First placed rectangle that ``candidate`` would violate, if any."""
    for rect in placed:
        if overlaps(candidate, rect, clearance, epsilon):
            return rect
    return None


def can_place(
    x: CM,
    y: CM,
    length: CM,
    width: CM,
    placed: Iterable[PlacedRect],
    clearance: CM,
    container: Container,
    epsilon: float = EPSILON,
) -> bool:
    if not fits(x, y, length, width, container):
        return False
    candidate = PlacedRect(x, y, length, width)
    return find_collision(candidate, placed, clearance, epsilon) is None


def rect_area(rect: PlacedRect) -> float:
    _, _, length, width = rect
    return max(0.0, length) * max(0.0, width)


def rect_center(rect: PlacedRect) -> tuple[float, float]:
    x, y, length, width = rect
    return x + length / 2.0, y + width / 2.0
