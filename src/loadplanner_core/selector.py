from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .algorithms import STRATEGIES, StrategyKind
from .expansion import clone_instances
from .metrics import evaluate_placement
from .models import Container, PalletInstance, PlacementResult, StrategyOutcome
from .settings import EngineSettings, load_settings
from .units import CM
from .verification import placement_flags

logger = logging.getLogger(__name__)


class StrategySelector:
    """Run → verify → score → keep the best placement."""

    def __init__(
        self,
        container: Container,
        clearance: CM,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.container = container
        self.clearance = clearance
        self.settings = settings if settings is not None else load_settings()

    @property
    def kinds(self) -> List[StrategyKind]:
        return [StrategyKind(name) for name in self.settings.strategies]

    def score(self, instances: Sequence[PalletInstance]) -> float:
        return evaluate_placement(
            instances,
            self.container,
            self.settings.efficiency_weight,
            self.settings.compactness_weight,
        )

    def run(
        self, kind: StrategyKind, instances: Sequence[PalletInstance]
    ) -> StrategyOutcome:
        """Run one strategy on a private copy of ``instances``.

        Failures are returned as an outcome with ``error`` set instead of
        being raised, so one broken strategy never stops the others.
        """
        own = clone_instances(instances)
        strategy = STRATEGIES[kind](self.container, self.clearance, self.settings)
        try:
            result = strategy.run(own)
        except Exception as exc:  # noqa: BLE001 - any strategy bug is isolated
            logger.warning("Strategy %s failed: %s", kind.value, exc, exc_info=True)
            return StrategyOutcome(kind.value, clone_instances(instances), 0.0, str(exc))

        if len(result) != len(instances):
            error = f"instance count changed from {len(instances)} to {len(result)}"
            logger.warning("Strategy %s rejected: %s", kind.value, error)
            return StrategyOutcome(kind.value, clone_instances(instances), 0.0, error)

        flags = placement_flags(
            result, self.container, self.clearance, self.settings.epsilon
        )
        if flags:
            error = "invalid placement: " + ", ".join(sorted(flags))
            logger.warning("Strategy %s rejected: %s", kind.value, error)
            return StrategyOutcome(kind.value, clone_instances(instances), 0.0, error)

        score = self.score(result)
        logger.debug(
            "Strategy %s placed %d/%d, score %.4f",
            kind.value,
            sum(1 for inst in result if inst.placed),
            len(result),
            score,
        )
        return StrategyOutcome(kind.value, result, score)

    def run_all(self, instances: Sequence[PalletInstance]) -> List[StrategyOutcome]:
        return [self.run(kind, instances) for kind in self.kinds]

    def best(
        self, instances: Sequence[PalletInstance]
    ) -> Tuple[Optional[str], PlacementResult, float, List[StrategyOutcome]]:
        """Highest score wins; the earlier strategy keeps ties."""
        outcomes = self.run_all(instances)
        best_name: Optional[str] = None
        best_result: PlacementResult = clone_instances(instances)
        best_score = 0.0
        for outcome in outcomes:
            if outcome.ok and outcome.score > best_score:
                best_name = outcome.kind
                best_result = outcome.instances
                best_score = outcome.score
        if best_name is None:
            logger.info("No strategy placed any pallet")
        return best_name, best_result, best_score, outcomes
