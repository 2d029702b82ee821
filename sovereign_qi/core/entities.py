"""
Pilot Project Entities

Defines the records held by the entity store:
- Pilot projects with their lifecycle status
- Simulation results comparing two governance scenarios

Records are immutable; the store replaces a record with an updated copy.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class PilotType(str, Enum):
    """Kind of organisation running the pilot."""
    ENTERPRISE = "ENTERPRISE"
    CITY = "CITY"
    HEALTHCARE = "HEALTHCARE"


class PilotStatus(str, Enum):
    """Lifecycle of a pilot project."""
    DRAFT = "DRAFT"
    CONFIGURED = "CONFIGURED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"

    @property
    def rank(self) -> int:
        return _STATUS_ORDER.index(self)

    def can_advance_to(self, other: "PilotStatus") -> bool:
        """Lifecycle only moves forward."""
        return other.rank > self.rank


_STATUS_ORDER = [
    PilotStatus.DRAFT,
    PilotStatus.CONFIGURED,
    PilotStatus.RUNNING,
    PilotStatus.COMPLETED,
]


MAJORITY_LOGIC_LABEL = "Majority Logic"
QI_LOGIC_LABEL = "Qi Logic"


@dataclass(frozen=True)
class ScenarioMetrics:
    """
    Comparative scores for one governance scenario.

    Dimensionless, non-negative, no upper bound.
    """
    label: str
    innovation_index: float
    burnout_index: float
    liability_index: float

    def __post_init__(self):
        for name in ("innovation_index", "burnout_index", "liability_index"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "innovationIndex": self.innovation_index,
            "burnoutIndex": self.burnout_index,
            "liabilityIndex": self.liability_index,
        }


@dataclass(frozen=True)
class SimulationResult:
    """Result of a simulation run: Majority Logic (A) vs Qi Logic (B)."""
    scenario_a: ScenarioMetrics
    scenario_b: ScenarioMetrics

    def to_dict(self) -> dict:
        return {
            "scenarioA": self.scenario_a.to_dict(),
            "scenarioB": self.scenario_b.to_dict(),
        }


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class PilotProject:
    """
    A registered comparison case between two governance policies.

    Descriptive fields are fixed at creation. Only the store changes
    ``status`` and ``simulation_result``, by replacing the record.
    """
    id: str
    name: str
    type: PilotType
    org_name: str
    region: str
    primary_objective: str
    majority_logic_desc: str
    qi_logic_desc: str
    status: PilotStatus = PilotStatus.DRAFT
    created_at: datetime = field(default_factory=utc_now)
    simulation_result: Optional[SimulationResult] = None
    owner_email: Optional[str] = None

    def __post_init__(self):
        has_result = self.simulation_result is not None
        if has_result != (self.status == PilotStatus.COMPLETED):
            raise ValueError(
                "simulation_result must be present iff status is COMPLETED"
            )

    @property
    def is_completed(self) -> bool:
        return self.status == PilotStatus.COMPLETED

    def with_result(self, result: SimulationResult) -> "PilotProject":
        """Return a completed copy of this pilot carrying ``result``."""
        return replace(self, status=PilotStatus.COMPLETED, simulation_result=result)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "orgName": self.org_name,
            "region": self.region,
            "primaryObjective": self.primary_objective,
            "majorityLogicDesc": self.majority_logic_desc,
            "qiLogicDesc": self.qi_logic_desc,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
        }
        if self.simulation_result is not None:
            data["simulationResult"] = self.simulation_result.to_dict()
        if self.owner_email is not None:
            data["ownerEmail"] = self.owner_email
        return data
