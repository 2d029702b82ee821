"""
Subscription Bus

Ordered registry of zero-argument change listeners. Each subscription
gets its own removal token, so registering the same callback twice
yields two independently removable registrations.
"""

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable
from uuid import UUID, uuid4

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@dataclass
class Subscription:
    """Handle returned by ``subscribe``; call it to unsubscribe."""
    token: UUID
    callback: Listener
    _bus: "SubscriptionBus" = field(repr=False)

    def unsubscribe(self) -> bool:
        """Remove this registration. Returns False if already removed."""
        return self._bus._remove(self.token)

    def __call__(self) -> bool:
        return self.unsubscribe()


class SubscriptionBus:
    """Synchronous fan-out to registered listeners, in registration order."""

    def __init__(self):
        self._listeners: list[tuple[UUID, Listener]] = []
        self._lock = RLock()
        self.failures = 0

    def subscribe(self, callback: Listener) -> Subscription:
        """Register ``callback`` and return its unsubscribe handle."""
        token = uuid4()
        with self._lock:
            self._listeners.append((token, callback))
        return Subscription(token=token, callback=callback, _bus=self)

    def _remove(self, token: UUID) -> bool:
        with self._lock:
            for i, (existing, _) in enumerate(self._listeners):
                if existing == token:
                    del self._listeners[i]
                    return True
        return False

    def __len__(self) -> int:
        return len(self._listeners)

    def publish(self) -> None:
        """
        Invoke every registered listener once.

        A listener that raises is logged and skipped; the remaining
        listeners still run and nothing propagates to the caller.
        """
        with self._lock:
            listeners = list(self._listeners)

        for token, callback in listeners:
            try:
                callback()
            except Exception:
                self.failures += 1
                logger.exception("Subscriber %s failed during publish", token)
