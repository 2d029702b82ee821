"""
Entity Store

Authoritative in-memory registry of pilot projects and the only writer
of pilot state. Every committed mutation is announced on the
subscription bus after the new state is visible to readers.
"""

import logging
import secrets
import string
from collections.abc import Iterable, Mapping
from threading import RLock
from typing import Optional, Union

from pydantic import ValidationError

from .entities import PilotProject, PilotStatus, SimulationResult, utc_now
from .errors import AccessDeniedError, ConflictError, InvalidPilotError, NotFoundError
from .events import Listener, Subscription, SubscriptionBus
from .schemas import PilotCreate

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


def generate_pilot_id() -> str:
    """Random id of the form ``pilot-xxxxxxxxx`` (base36)."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
    return f"pilot-{suffix}"


class EntityStore:
    """
    Registry of pilot projects, newest first.

    Mutations (``create``, ``apply_result``) are serialized by a lock and
    publish exactly one notification each, while still holding the lock,
    so subscribers observe mutations in the order they were applied.
    A mutation made by a subscriber during a notification is announced
    after the current fan-out reaches every subscriber.
    """

    def __init__(self, bus: Optional[SubscriptionBus] = None):
        self.bus = bus or SubscriptionBus()
        self._pilots: dict[str, PilotProject] = {}
        # Ids, newest first
        self._order: list[str] = []
        self._lock = RLock()
        self._pending_notifications = 0
        self._notifying = False

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, pilot_id: str) -> bool:
        return pilot_id in self._pilots

    def subscribe(self, callback: Listener) -> Subscription:
        """Shortcut for ``self.bus.subscribe``."""
        return self.bus.subscribe(callback)

    def list_all(self) -> list[PilotProject]:
        """All pilots, newest first, as a fresh list."""
        with self._lock:
            return [self._pilots[pid] for pid in self._order]

    def list_by_owner(self, owner_email: str) -> list[PilotProject]:
        """Pilots owned by ``owner_email``, newest first."""
        return [p for p in self.list_all() if p.owner_email == owner_email]

    def get_by_id(self, pilot_id: str) -> PilotProject:
        try:
            return self._pilots[pilot_id]
        except KeyError:
            raise NotFoundError(pilot_id) from None

    def get_owned(self, pilot_id: str, owner_email: Optional[str] = None) -> PilotProject:
        """
        Look up a pilot on behalf of ``owner_email``.

        Raises AccessDeniedError when an owner is given and does not match.
        """
        pilot = self.get_by_id(pilot_id)
        if owner_email is not None and pilot.owner_email != owner_email:
            raise AccessDeniedError(pilot_id, owner_email)
        return pilot

    def create(self, fields: Union[PilotCreate, Mapping]) -> PilotProject:
        """
        Register a new pilot in DRAFT state and announce it.

        ``fields`` is a PilotCreate or a mapping of its fields (snake_case
        or camelCase). Raises InvalidPilotError when fields are missing.
        """
        if not isinstance(fields, PilotCreate):
            try:
                fields = PilotCreate.model_validate(dict(fields))
            except ValidationError as exc:
                raise InvalidPilotError(str(exc)) from exc

        with self._lock:
            pilot_id = generate_pilot_id()
            while pilot_id in self._pilots:
                pilot_id = generate_pilot_id()

            pilot = PilotProject(
                id=pilot_id,
                status=PilotStatus.DRAFT,
                created_at=utc_now(),
                **fields.model_dump()
            )
            self._pilots[pilot_id] = pilot
            self._order.insert(0, pilot_id)

            logger.info("Created pilot %s (%s)", pilot_id, pilot.name)
            self._notify()

        return pilot

    def apply_result(self, pilot_id: str, result: SimulationResult) -> PilotProject:
        """
        Mark a pilot COMPLETED with ``result`` attached and announce it.

        Raises ConflictError if the pilot is already COMPLETED.
        """
        with self._lock:
            current = self.get_by_id(pilot_id)
            if not current.status.can_advance_to(PilotStatus.COMPLETED):
                raise ConflictError(pilot_id, f"already {current.status.value}")
            updated = current.with_result(result)
            self._pilots[pilot_id] = updated

            logger.info(
                "Pilot %s: %s -> %s", pilot_id, current.status.value, updated.status.value
            )
            self._notify()

        return updated

    def seed(self, pilots: Iterable[PilotProject]) -> None:
        """
        Load a fixed initial set at startup, without notifying.

        ``pilots`` is given newest first, matching ``list_all``.
        Raises ValueError on duplicate ids.
        """
        with self._lock:
            for pilot in pilots:
                if pilot.id in self._pilots:
                    raise ValueError(f"Duplicate pilot id: {pilot.id}")
                self._pilots[pilot.id] = pilot
                self._order.append(pilot.id)

    def _notify(self) -> None:
        # Nested mutations from inside a listener queue up behind the
        # fan-out already in progress.
        with self._lock:
            self._pending_notifications += 1
            if self._notifying:
                return

            self._notifying = True
            try:
                while self._pending_notifications:
                    self._pending_notifications -= 1
                    self.bus.publish()
            finally:
                self._notifying = False
