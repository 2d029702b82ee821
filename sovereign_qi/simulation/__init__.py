"""
Simulation of governance pilots

Each run compares two scenarios for a pilot:
- Scenario A: "Majority Logic"
- Scenario B: "Qi Logic"

and commits the comparison back to the pilot, completing its lifecycle.
"""

from .engine import (
    SimulationEngine,
    evaluate_scenarios,
    MAJORITY_LOGIC_METRICS,
    QI_LOGIC_METRICS
)

__all__ = [
    "SimulationEngine",
    "evaluate_scenarios",
    "MAJORITY_LOGIC_METRICS",
    "QI_LOGIC_METRICS"
]
