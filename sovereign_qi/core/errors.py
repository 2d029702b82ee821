"""
Domain errors raised by the pilot store and simulation engine.
"""


class SovereignQiError(Exception):
    """Base class for all domain errors."""


class NotFoundError(SovereignQiError, LookupError):
    """No pilot project exists with the given id."""

    def __init__(self, pilot_id: str):
        super().__init__(f"Pilot not found: {pilot_id}")
        self.pilot_id = pilot_id


class ConflictError(SovereignQiError):
    """The requested operation conflicts with the pilot's lifecycle state."""

    def __init__(self, pilot_id: str, reason: str):
        super().__init__(f"Conflict on pilot {pilot_id}: {reason}")
        self.pilot_id = pilot_id
        self.reason = reason


class InvalidPilotError(SovereignQiError, ValueError):
    """Pilot fields are missing or malformed."""


class AccessDeniedError(SovereignQiError, PermissionError):
    """The caller does not own the pilot."""

    def __init__(self, pilot_id: str, owner_email: str):
        super().__init__(f"Access denied to pilot {pilot_id} for {owner_email}")
        self.pilot_id = pilot_id
        self.owner_email = owner_email
