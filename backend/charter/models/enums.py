"""
Enums for the charter backend.
"""

from enum import Enum


class TripStatus(str, Enum):
    """Trip lifecycle. Transitions only move forward: scheduled, departed, arrived."""
    SCHEDULED = "scheduled"
    DEPARTED = "departed"
    ARRIVED = "arrived"

    @property
    def rank(self) -> int:
        """Position in the lifecycle, used to reject backward transitions."""
        return _TRIP_STATUS_ORDER.index(self)

    @property
    def is_deletable(self) -> bool:
        return self is TripStatus.SCHEDULED


_TRIP_STATUS_ORDER = [TripStatus.SCHEDULED, TripStatus.DEPARTED, TripStatus.ARRIVED]
