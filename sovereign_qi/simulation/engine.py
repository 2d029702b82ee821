"""
Simulation Engine

Produces the comparative governance result for one pilot and commits it
to the entity store. The computation models a long-running external
evaluator: an artificial, non-cancellable delay followed by the fixed
Majority Logic vs Qi Logic scores.

At most one run is in flight per pilot. Concurrent callers for the same
pilot share the in-flight run and receive the same result.
"""

import asyncio
import logging
from typing import Optional

from ..config.settings import SimulationConfig
from ..core.entities import (
    MAJORITY_LOGIC_LABEL,
    QI_LOGIC_LABEL,
    PilotProject,
    ScenarioMetrics,
    SimulationResult
)
from ..core.errors import ConflictError
from ..core.store import EntityStore

logger = logging.getLogger(__name__)


# Placeholder scores, independent of the pilot's narrative fields
MAJORITY_LOGIC_METRICS = ScenarioMetrics(
    label=MAJORITY_LOGIC_LABEL,
    innovation_index=1.0,
    burnout_index=0.8,
    liability_index=0.7
)
QI_LOGIC_METRICS = ScenarioMetrics(
    label=QI_LOGIC_LABEL,
    innovation_index=1.4,
    burnout_index=0.3,
    liability_index=0.1
)


def evaluate_scenarios(pilot: PilotProject) -> SimulationResult:
    """Compare the pilot's two governance policies."""
    return SimulationResult(
        scenario_a=MAJORITY_LOGIC_METRICS,
        scenario_b=QI_LOGIC_METRICS
    )


class SimulationEngine:
    """
    Runs simulations against an entity store.

    The engine never writes pilot state itself; results are committed
    through ``EntityStore.apply_result``.
    """

    def __init__(self, store: EntityStore, config: Optional[SimulationConfig] = None):
        self.store = store
        self.config = config or SimulationConfig()
        self._in_flight: dict[str, asyncio.Task] = {}

    @property
    def delay_seconds(self) -> float:
        return self.config.delay_seconds

    def is_running(self, pilot_id: str) -> bool:
        """True while a run for ``pilot_id`` is in flight."""
        task = self._in_flight.get(pilot_id)
        return task is not None and not task.done()

    async def run(self, pilot_id: str) -> SimulationResult:
        """
        Simulate ``pilot_id`` and commit the result.

        Raises NotFoundError before any delay when the pilot is unknown,
        and ConflictError when it has already completed. Cancelling the
        caller does not cancel the run itself.
        """
        pilot = self.store.get_by_id(pilot_id)

        task = self._in_flight.get(pilot_id)
        if task is None:
            if pilot.is_completed:
                raise ConflictError(pilot_id, "simulation already completed")
            task = asyncio.ensure_future(self._execute(pilot))
            self._in_flight[pilot_id] = task
            task.add_done_callback(lambda t: self._forget(pilot_id, t))
        else:
            logger.debug("Joining in-flight simulation for pilot %s", pilot_id)

        return await asyncio.shield(task)

    def _forget(self, pilot_id: str, task: asyncio.Task) -> None:
        if self._in_flight.get(pilot_id) is task:
            del self._in_flight[pilot_id]

    async def _execute(self, pilot: PilotProject) -> SimulationResult:
        logger.info(
            "Simulation started for pilot %s (%s), delay %.2fs",
            pilot.id, pilot.name, self.delay_seconds
        )

        await asyncio.sleep(self.delay_seconds)

        result = evaluate_scenarios(pilot)
        self.store.apply_result(pilot.id, result)

        logger.info("Simulation completed for pilot %s", pilot.id)
        return result
