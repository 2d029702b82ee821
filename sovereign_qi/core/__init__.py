"""
Core domain: pilot project entities, the entity store and its
subscription bus.
"""

from .entities import (
    PilotType,
    PilotStatus,
    PilotProject,
    ScenarioMetrics,
    SimulationResult,
    MAJORITY_LOGIC_LABEL,
    QI_LOGIC_LABEL
)
from .errors import (
    SovereignQiError,
    NotFoundError,
    ConflictError,
    InvalidPilotError,
    AccessDeniedError
)
from .events import Subscription, SubscriptionBus
from .schemas import PilotCreate
from .store import EntityStore

__all__ = [
    "PilotType",
    "PilotStatus",
    "PilotProject",
    "ScenarioMetrics",
    "SimulationResult",
    "MAJORITY_LOGIC_LABEL",
    "QI_LOGIC_LABEL",
    "SovereignQiError",
    "NotFoundError",
    "ConflictError",
    "InvalidPilotError",
    "AccessDeniedError",
    "Subscription",
    "SubscriptionBus",
    "PilotCreate",
    "EntityStore"
]
