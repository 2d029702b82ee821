"""
Tests for SimulationEngine
"""
import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from sovereign_qi.config.settings import SimulationConfig
from sovereign_qi.core.entities import PilotStatus
from sovereign_qi.core.errors import ConflictError, NotFoundError
from sovereign_qi.simulation.engine import SimulationEngine


@pytest.mark.asyncio
async def test_run_completes_pilot(store, engine, pilot_fields):
    pilot = store.create(pilot_fields)

    result = await engine.run(pilot.id)

    assert result.scenario_a.label == "Majority Logic"
    assert (result.scenario_a.innovation_index,
            result.scenario_a.burnout_index,
            result.scenario_a.liability_index) == (1.0, 0.8, 0.7)
    assert result.scenario_b.label == "Qi Logic"
    assert (result.scenario_b.innovation_index,
            result.scenario_b.burnout_index,
            result.scenario_b.liability_index) == (1.4, 0.3, 0.1)

    stored = store.get_by_id(pilot.id)
    assert stored.status == PilotStatus.COMPLETED
    assert stored.simulation_result == result
    assert not engine.is_running(pilot.id)


@pytest.mark.asyncio
async def test_run_unknown_pilot_fails_before_delay(store, engine):
    with patch("sovereign_qi.simulation.engine.asyncio.sleep", new=AsyncMock()) as sleep:
        with pytest.raises(NotFoundError):
            await engine.run("pilot-missing")

    sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_waits_for_configured_delay(store, pilot_fields):
    engine = SimulationEngine(store, SimulationConfig(delay_seconds=2.5))
    pilot = store.create(pilot_fields)

    with patch("sovereign_qi.simulation.engine.asyncio.sleep", new=AsyncMock()) as sleep:
        await engine.run(pilot.id)

    sleep.assert_awaited_once_with(2.5)


@pytest.mark.asyncio
async def test_store_stays_available_during_run(store, engine, pilot_fields):
    pilot = store.create(pilot_fields)

    task = asyncio.ensure_future(engine.run(pilot.id))
    await asyncio.sleep(0)

    assert engine.is_running(pilot.id)
    other = store.create({**pilot_fields, "name": "Second"})
    assert store.get_by_id(pilot.id).status == PilotStatus.DRAFT
    assert [p.id for p in store.list_all()] == [other.id, pilot.id]

    await task
    assert store.get_by_id(pilot.id).status == PilotStatus.COMPLETED
    assert store.get_by_id(other.id).status == PilotStatus.DRAFT


@pytest.mark.asyncio
async def test_concurrent_runs_share_one_execution(store, engine, pilot_fields):
    pilot = store.create(pilot_fields)
    notifications = []
    store.subscribe(lambda: notifications.append(1))

    first, second = await asyncio.gather(engine.run(pilot.id), engine.run(pilot.id))

    assert first is second
    assert notifications == [1]


@pytest.mark.asyncio
async def test_runs_for_different_pilots_overlap(store, pilot_fields):
    """Two pilots finish within one delay window, not two"""
    delay = 0.2
    engine = SimulationEngine(store, SimulationConfig(delay_seconds=delay))
    a = store.create(pilot_fields)
    b = store.create(pilot_fields)
    loop = asyncio.get_running_loop()

    started = loop.time()
    runs = asyncio.gather(engine.run(a.id), engine.run(b.id))
    await asyncio.sleep(0)

    assert engine.is_running(a.id) and engine.is_running(b.id)

    await asyncio.sleep(delay * 1.5)
    assert store.get_by_id(a.id).status == PilotStatus.COMPLETED
    assert store.get_by_id(b.id).status == PilotStatus.COMPLETED

    await runs
    assert loop.time() - started < 2 * delay


@pytest.mark.asyncio
async def test_rerun_of_completed_pilot_is_rejected(store, engine, pilot_fields):
    pilot = store.create(pilot_fields)
    result = await engine.run(pilot.id)

    with patch("sovereign_qi.simulation.engine.asyncio.sleep", new=AsyncMock()) as sleep:
        with pytest.raises(ConflictError):
            await engine.run(pilot.id)

    sleep.assert_not_awaited()
    assert store.get_by_id(pilot.id).simulation_result is result


@pytest.mark.asyncio
async def test_cancelled_caller_does_not_cancel_run(store, engine, pilot_fields):
    pilot = store.create(pilot_fields)

    caller = asyncio.ensure_future(engine.run(pilot.id))
    await asyncio.sleep(0)
    caller.cancel()

    with pytest.raises(asyncio.CancelledError):
        await caller

    result = await engine.run(pilot.id)
    assert store.get_by_id(pilot.id).simulation_result == result
