"""
Pilot Workspace

Wires the entity store, subscription bus, simulation engine and council
advice into one context object, constructed once at process start and
passed to whatever exposes the operations:

- create pilot
- list pilots
- get pilot
- run simulation
- request council advice

Passing ``owner_email`` restricts an operation to that owner's pilots.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

from ..advice.council import generate_council_advice
from ..advice.decisions import CouncilDecision, CouncilDecisionLog
from ..advice.schemas import AdviceRequest
from ..config.settings import Settings, get_settings
from ..core.entities import PilotProject, SimulationResult
from ..core.events import Listener, Subscription, SubscriptionBus
from ..core.schemas import PilotCreate
from ..core.store import EntityStore
from ..simulation.engine import SimulationEngine
from .demo_data import demo_pilots

logger = logging.getLogger(__name__)


@dataclass
class PilotWorkspace:
    """Process-lifetime context holding all pilot state."""
    store: EntityStore
    engine: SimulationEngine
    decisions: CouncilDecisionLog
    settings: Settings = field(default_factory=get_settings)

    @property
    def bus(self) -> SubscriptionBus:
        return self.store.bus

    def subscribe(self, callback: Listener) -> Subscription:
        return self.store.subscribe(callback)

    def create_pilot(self, fields: Union[PilotCreate, Mapping]) -> PilotProject:
        return self.store.create(fields)

    def list_pilots(self, owner_email: Optional[str] = None) -> list[PilotProject]:
        if owner_email is not None:
            return self.store.list_by_owner(owner_email)
        return self.store.list_all()

    def get_pilot(self, pilot_id: str, owner_email: Optional[str] = None) -> PilotProject:
        return self.store.get_owned(pilot_id, owner_email)

    async def run_simulation(
        self,
        pilot_id: str,
        owner_email: Optional[str] = None
    ) -> SimulationResult:
        """Run a simulation. Ownership is checked before the run starts."""
        self.store.get_owned(pilot_id, owner_email)
        return await self.engine.run(pilot_id)

    async def request_advice(
        self,
        pilot_id: str,
        harms: Optional[str] = None,
        community_voices: Optional[str] = None,
        owner_email: Optional[str] = None
    ) -> CouncilDecision:
        """Ask the council about a pilot and log the decision."""
        pilot = self.store.get_owned(pilot_id, owner_email)

        request = AdviceRequest(
            primary_objective=pilot.primary_objective,
            majority_logic_desc=pilot.majority_logic_desc,
            qi_logic_desc=pilot.qi_logic_desc,
            harms=harms,
            community_voices=community_voices
        )
        advice = await generate_council_advice(request)
        return self.decisions.record(pilot_id, advice)


def build_workspace(settings: Optional[Settings] = None) -> PilotWorkspace:
    """Construct a workspace, seeding the demo pilots if enabled."""
    settings = settings or get_settings()

    store = EntityStore(SubscriptionBus())
    if settings.seed_demo_pilots:
        store.seed(demo_pilots())
        logger.info("Seeded %d demo pilots", len(store))

    return PilotWorkspace(
        store=store,
        engine=SimulationEngine(store, settings.simulation),
        decisions=CouncilDecisionLog(store),
        settings=settings
    )
