"""
Pytest configuration and fixtures
"""
import pytest

from sovereign_qi.config.settings import Settings, SimulationConfig
from sovereign_qi.core.events import SubscriptionBus
from sovereign_qi.core.store import EntityStore
from sovereign_qi.simulation.engine import SimulationEngine
from sovereign_qi.use_cases.pilot_workspace import build_workspace

TEST_DELAY_SECONDS = 0.05


@pytest.fixture
def pilot_fields() -> dict:
    """Fields of a valid pilot, in wire (camelCase) form"""
    return {
        "name": "Neo-Tokyo Transit Grid",
        "type": "CITY",
        "orgName": "Tokyo Metro Govt",
        "region": "APAC",
        "primaryObjective": "Reduce commuter stress & accident liability",
        "majorityLogicDesc": "Efficiency first.",
        "qiLogicDesc": "Dignity first.",
    }


@pytest.fixture
def bus() -> SubscriptionBus:
    return SubscriptionBus()


@pytest.fixture
def store(bus) -> EntityStore:
    return EntityStore(bus)


@pytest.fixture
def engine(store) -> SimulationEngine:
    return SimulationEngine(store, SimulationConfig(delay_seconds=TEST_DELAY_SECONDS))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        seed_demo_pilots=False,
        simulation=SimulationConfig(delay_seconds=TEST_DELAY_SECONDS)
    )


@pytest.fixture
def workspace(settings):
    return build_workspace(settings)
