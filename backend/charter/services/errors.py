"""
Error taxonomy for the charter services.

Services raise these and never translate them; the REST boundary maps each
kind to a transport status code.
"""

from typing import List, Optional


class CharterError(Exception):
    """Base class for every error the charter services raise."""

    kind = "charter_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CharterError):
    """A required field is missing or malformed; nothing was modified."""

    kind = "validation_error"


class NotFoundError(CharterError):
    """A referenced record is absent or owned by another account."""

    kind = "not_found"


class AirportNotFoundError(NotFoundError):
    """Airport code is not in the reference catalog."""

    def __init__(self, icao: str):
        super().__init__(f"Airport not found: {icao}")
        self.icao = icao


class AircraftNotFoundError(NotFoundError):
    """Plane lookup failed."""

    def __init__(self, plane_id: int):
        super().__init__(f"Plane not found: {plane_id}")
        self.plane_id = plane_id


class PilotNotFoundError(NotFoundError):
    """Pilot lookup failed."""

    def __init__(self, pilot_id: int):
        super().__init__(f"Pilot not found: {pilot_id}")
        self.pilot_id = pilot_id


class TripNotFoundError(NotFoundError):
    """Trip lookup failed."""

    def __init__(self, trip_id: int):
        super().__init__(f"Trip not found: {trip_id}")
        self.trip_id = trip_id


class AccountNotFoundError(NotFoundError):
    """Account lookup failed."""

    def __init__(self, account_id: int):
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


class ReferentialConflictError(CharterError):
    """Delete blocked because trips still reference the record."""

    kind = "referential_conflict"

    def __init__(self, message: str, trip_ids: Optional[List[int]] = None):
        super().__init__(message)
        self.trip_ids = trip_ids or []


class InvalidStateError(CharterError):
    """Operation is illegal for the record's current status."""

    kind = "invalid_state"


class InvalidAircraftError(CharterError):
    """Aircraft data cannot be used for an estimate (e.g. fewer than one engine)."""

    kind = "invalid_aircraft"


class CostEstimationError(CharterError):
    """Trip cost could not be estimated, so the trip mutation was aborted."""

    kind = "cost_estimation_failed"


__all__ = [
    'CharterError',
    'ValidationError',
    'NotFoundError',
    'AirportNotFoundError',
    'AircraftNotFoundError',
    'PilotNotFoundError',
    'TripNotFoundError',
    'AccountNotFoundError',
    'ReferentialConflictError',
    'InvalidStateError',
    'InvalidAircraftError',
    'CostEstimationError',
]
