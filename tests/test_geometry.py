import pytest

from loadplanner_core.geometry import can_place, find_collision, fits, overlaps
from loadplanner_core.models import Container, PlacedRect


def test_touching_rectangles_do_not_overlap_without_clearance():
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    b = PlacedRect(100.0, 0.0, 100.0, 100.0)
    assert not overlaps(a, b, 0.0)
    assert not overlaps(b, a, 0.0)


def test_clearance_is_a_separation_requirement():
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    near = PlacedRect(103.0, 0.0, 100.0, 100.0)
    far = PlacedRect(105.0, 0.0, 100.0, 100.0)
    assert overlaps(a, near, 5.0)
    assert not overlaps(a, far, 5.0)
    # sizes are untouched by the test
    assert a == PlacedRect(0.0, 0.0, 100.0, 100.0)


def test_separation_on_either_axis_is_enough():
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    above = PlacedRect(50.0, 110.0, 100.0, 100.0)
    assert not overlaps(a, above, 10.0)
    assert overlaps(a, above, 10.5)


def test_epsilon_absorbs_rounding_at_contact():
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    b = PlacedRect(100.0 - 0.005, 0.0, 100.0, 100.0)
    assert not overlaps(a, b, 0.0, epsilon=0.01)
    assert overlaps(a, b, 0.0, epsilon=0.0)


@pytest.mark.parametrize("bx", [100.0, 100.01, 100.5])
def test_boundary_with_clearance_and_epsilon_is_stable(bx):
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    b = PlacedRect(bx, 0.0, 100.0, 100.0001)
    results = {overlaps(a, b, 0.01, 0.01) for _ in range(5)}
    results |= {overlaps(b, a, 0.01, 0.01) for _ in range(5)}
    assert results == {False}


def test_boundary_inside_clearance_overlaps_symmetrically():
    a = PlacedRect(0.0, 0.0, 100.0, 100.0)
    b = PlacedRect(99.99, 0.0, 100.0, 100.0001)
    assert overlaps(a, b, 0.01, 0.01)
    assert overlaps(b, a, 0.01, 0.01)


def test_fits_checks_every_border():
    container = Container(300.0, 200.0)
    assert fits(0, 0, 300, 200, container)
    assert not fits(-1, 0, 10, 10, container)
    assert not fits(0, -1, 10, 10, container)
    assert not fits(291, 0, 10, 10, container)
    assert not fits(0, 191, 10, 10, container)


def test_can_place_combines_bounds_and_collisions():
    container = Container(300.0, 100.0)
    placed = [PlacedRect(0.0, 0.0, 100.0, 100.0)]
    assert not can_place(50, 0, 100, 100, placed, 0.0, container)
    assert can_place(100, 0, 100, 100, placed, 0.0, container)
    assert not can_place(100, 0, 100, 100, placed, 1.0, container)
    assert not can_place(250, 0, 100, 100, placed, 0.0, container)


def test_find_collision_returns_first_blocker():
    placed = [
        PlacedRect(0.0, 0.0, 50.0, 50.0),
        PlacedRect(60.0, 0.0, 50.0, 50.0),
    ]
    candidate = PlacedRect(40.0, 0.0, 30.0, 30.0)
    assert find_collision(candidate, placed) == placed[0]
    assert find_collision(PlacedRect(0.0, 60.0, 10.0, 10.0), placed) is None
