"""
Tests for pilot entities
"""
from dataclasses import FrozenInstanceError

import pytest

from sovereign_qi.core.entities import PilotProject, PilotStatus, PilotType, ScenarioMetrics
from sovereign_qi.simulation.engine import MAJORITY_LOGIC_METRICS, QI_LOGIC_METRICS, evaluate_scenarios


def _pilot(**overrides) -> PilotProject:
    fields = dict(
        id="pilot-abc",
        name="Test",
        type=PilotType.ENTERPRISE,
        org_name="Org",
        region="EU",
        primary_objective="Objective",
        majority_logic_desc="Majority",
        qi_logic_desc="Qi",
    )
    fields.update(overrides)
    return PilotProject(**fields)


def test_lifecycle_only_moves_forward():
    assert PilotStatus.DRAFT.can_advance_to(PilotStatus.COMPLETED)
    assert PilotStatus.CONFIGURED.can_advance_to(PilotStatus.RUNNING)
    assert not PilotStatus.COMPLETED.can_advance_to(PilotStatus.COMPLETED)
    assert not PilotStatus.RUNNING.can_advance_to(PilotStatus.DRAFT)


def test_result_requires_completed_status():
    result = evaluate_scenarios(_pilot())

    with pytest.raises(ValueError):
        _pilot(simulation_result=result)
    with pytest.raises(ValueError):
        _pilot(status=PilotStatus.COMPLETED)


def test_pilot_is_immutable():
    pilot = _pilot()

    with pytest.raises(FrozenInstanceError):
        pilot.status = PilotStatus.COMPLETED


def test_metrics_must_be_non_negative():
    with pytest.raises(ValueError):
        ScenarioMetrics(label="x", innovation_index=-0.1, burnout_index=0, liability_index=0)


def test_to_dict_uses_wire_names():
    pilot = _pilot().with_result(evaluate_scenarios(_pilot()))

    data = pilot.to_dict()

    assert data["status"] == "COMPLETED"
    assert data["orgName"] == "Org"
    assert data["simulationResult"]["scenarioA"] == {
        "label": "Majority Logic",
        "innovationIndex": 1.0,
        "burnoutIndex": 0.8,
        "liabilityIndex": 0.7,
    }
    assert data["simulationResult"]["scenarioB"]["label"] == "Qi Logic"
    assert "ownerEmail" not in data


def test_scenario_constants():
    assert (MAJORITY_LOGIC_METRICS.innovation_index,
            MAJORITY_LOGIC_METRICS.burnout_index,
            MAJORITY_LOGIC_METRICS.liability_index) == (1.0, 0.8, 0.7)
    assert (QI_LOGIC_METRICS.innovation_index,
            QI_LOGIC_METRICS.burnout_index,
            QI_LOGIC_METRICS.liability_index) == (1.4, 0.3, 0.1)
