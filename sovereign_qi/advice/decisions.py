"""
Council Decision Log

Governance trail of the advice issued for each pilot. Append-only,
in memory, newest first per pilot.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from ..core.entities import utc_now
from ..core.store import EntityStore
from .schemas import AdviceStatus, CouncilAdvice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CouncilDecision:
    """Advice recorded against a pilot."""
    pilot_id: str
    advice: CouncilAdvice
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    @property
    def status(self) -> AdviceStatus:
        return self.advice.status


class CouncilDecisionLog:
    """Decisions keyed by pilot id."""

    def __init__(self, store: EntityStore):
        self._store = store
        self._decisions: dict[str, list[CouncilDecision]] = {}

    def record(self, pilot_id: str, advice: CouncilAdvice) -> CouncilDecision:
        """Append a decision. Raises NotFoundError for an unknown pilot."""
        self._store.get_by_id(pilot_id)

        decision = CouncilDecision(pilot_id=pilot_id, advice=advice)
        self._decisions.setdefault(pilot_id, []).insert(0, decision)

        logger.info(
            "Council decision %s for pilot %s: %s",
            decision.id, pilot_id, decision.status.value
        )
        return decision

    def list_for_pilot(self, pilot_id: str) -> list[CouncilDecision]:
        """Decisions for ``pilot_id``, newest first."""
        self._store.get_by_id(pilot_id)
        return list(self._decisions.get(pilot_id, []))
