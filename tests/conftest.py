import pytest

from loadplanner_core.expansion import expand_instances
from loadplanner_core.models import PalletType


@pytest.fixture
def mixed_instances():
    types = [
        PalletType("euro", 120, 80, 6),
        PalletType("square", 100, 100, 4),
        PalletType("small", 60, 40, 10, allow_rotation=False),
        PalletType("odd", 75.5, 33.3, 5),
    ]
    return expand_instances(types)
