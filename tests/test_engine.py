import math
import time

import pytest

from loadplanner_core import InvalidPlacementInput, place
from loadplanner_core.geometry import overlaps
from loadplanner_core.models import Container, PalletType
from loadplanner_core.settings import EngineSettings
from loadplanner_core.verification import is_valid_placement


def test_forty_foot_mixed_load_fits_completely():
    container = Container(1203.2, 235.0)
    types = [PalletType("a", 110, 110, 12), PalletType("b", 100, 125, 8)]
    run = place(types, container, 1.0, settings=EngineSettings())

    assert run.stats.total_pallets == 20
    assert run.stats.placed_pallets == 20
    assert run.stats.efficiency == pytest.approx(245200 / container.area)
    assert run.stats.placed_by_type == {"a": 12, "b": 8}
    assert run.stats.strategy in run.scores
    assert run.score == max(run.scores.values())


def test_oversized_pallet_places_nothing():
    run = place([PalletType("big", 300, 300, 1)], Container(589.8, 235.0), 0.0)

    assert run.stats.total_pallets == 1
    assert run.stats.placed_pallets == 0
    assert run.stats.efficiency == 0
    assert run.stats.strategy is None
    assert not run.placements[0].placed


def test_larger_clearance_never_places_more():
    container = Container(400.0, 235.0)
    types = [PalletType("s", 50, 40, 16)]
    tight = place(types, container, 0.0, settings=EngineSettings())
    loose = place(types, container, 50.0, settings=EngineSettings())

    assert tight.stats.placed_pallets == 16
    assert loose.stats.placed_pallets <= tight.stats.placed_pallets


def test_near_identical_sizes_are_stable():
    container = Container(300.0, 200.0)
    types = [
        PalletType("p", 100, 100, 1, allow_rotation=False),
        PalletType("q", 100, 100.0001, 1, allow_rotation=False),
    ]
    settings = EngineSettings(epsilon=0.01)
    first = place(types, container, 0.01, settings=settings)
    second = place(types, container, 0.01, settings=settings)

    assert first.signature == second.signature
    assert first.stats.placed_pallets == 2
    a, b = (inst.footprint() for inst in first.placements)
    assert not overlaps(a, b, 0.01, 0.01)


def test_same_input_gives_same_placement():
    container = Container(1203.2, 235.0)
    types = [
        PalletType("euro", 120, 80, 6),
        PalletType("square", 100, 100, 4),
        PalletType("small", 60, 40, 10, allow_rotation=False),
    ]
    runs = [place(types, container, 5.0, settings=EngineSettings()) for _ in range(2)]
    assert runs[0].signature == runs[1].signature
    assert runs[0].stats.strategy == runs[1].stats.strategy


def test_every_instance_is_returned_once():
    types = [PalletType("a", 120, 80, 30), PalletType("b", 100, 120, 30)]
    run = place(types, Container(589.8, 235.0), 2.0, settings=EngineSettings())

    keys = [inst.key for inst in run.placements]
    assert len(keys) == 60
    assert len(set(keys)) == 60
    assert run.stats.placed_pallets + run.stats.unplaced_pallets == 60
    assert 0 < run.stats.placed_pallets < 60


def test_zero_quantity_type_is_empty():
    run = place([PalletType("none", 120, 80, 0)], Container(589.8, 235.0), 0.0)
    assert run.placements == []
    assert run.stats.total_pallets == 0
    assert run.stats.efficiency == 0


@pytest.mark.parametrize(
    "types, container, clearance, fragment",
    [
        ([PalletType("a", 0, 80, 1)], Container(600, 235), 0, "dimensions"),
        ([PalletType("a", 120, 80, -1)], Container(600, 235), 0, "quantity"),
        ([PalletType("a", 120, 80, 1.5)], Container(600, 235), 0, "quantity"),
        ([PalletType("a", 120, 80, 1)], Container(600, -1), 0, "Container"),
        ([PalletType("a", 120, 80, 1)], Container(600, 235), -1, "Clearance"),
        ([PalletType("a", 120, 80, 1)], Container(600, 235), math.nan, "Clearance"),
    ],
)
def test_invalid_input_is_rejected(types, container, clearance, fragment):
    with pytest.raises(InvalidPlacementInput) as excinfo:
        place(types, container, clearance)
    assert fragment in str(excinfo.value)
    assert excinfo.value.errors


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        place([PalletType("a", 120, 80, True)], Container(600, 235), 0)


@pytest.mark.parametrize(
    "types",
    [
        [PalletType("s", 40, 30, 300)],
        [PalletType("m", 37.3, 23.1, 150), PalletType("n", 61.7, 44.9, 150)],
    ],
)
def test_hundreds_of_pallets_stay_fast(types):
    container = Container(1203.2, 235.0)
    start = time.perf_counter()
    run = place(types, container, 1.0, settings=EngineSettings())
    elapsed = time.perf_counter() - start

    assert elapsed < 10.0
    assert run.stats.total_pallets == 300
    assert 0 < run.stats.placed_pallets < 300
    assert all(outcome.ok for outcome in run.outcomes)
    assert len({inst.key for inst in run.placements}) == 300
    assert is_valid_placement(run.placements, container, 1.0)
