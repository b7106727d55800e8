"""
Trip records and their business rules.

Trips move through ``scheduled -> departed -> arrived`` and never back.
Every create, and every update that changes the route or the plane, runs the
cost estimator; an estimate failure aborts the mutation so no trip is ever
stored with made-up costs. Only scheduled trips may be deleted.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..database.config import DatabaseConfig
from ..database.models import Trip
from ..models.airport import RouteModel
from ..models.enums import TripStatus
from ..models.trip import CostEstimate, TripCreate, TripModel, TripPatch
from ..utils.config import utcnow
from .airport_catalog import AirportCatalog
from .errors import (
    AirportNotFoundError,
    CostEstimationError,
    InvalidAircraftError,
    InvalidStateError,
    ValidationError,
)
from .estimators import TripCostEstimator, estimate_arrival_time
from .records import load_owned_pilot, load_owned_plane, load_owned_trip, require_text

logger = logging.getLogger(__name__)

# Called after commit with the updated trip and its previous status
StatusListener = Callable[[TripModel, TripStatus], None]

_COST_INPUTS = ("departure_airport", "arrival_airport", "plane_id")


class TripService:
    """
    Owner-scoped trip CRUD with cost estimation and status rules.

    Args:
        db: Record store
        catalog: Airport catalog used for cost estimates and routes
        clock: Source of "now" for auto-stamped actual times
    """

    def __init__(
        self,
        db: DatabaseConfig,
        catalog: AirportCatalog,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.cost_estimator = TripCostEstimator(catalog)
        self.clock = clock
        self._status_listeners: List[StatusListener] = []

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a callback fired whenever a trip's status changes."""
        self._status_listeners.append(listener)

    def list(self, owner_id: int) -> List[TripModel]:
        """Trips of the owner ordered by departure time."""
        with self.db.get_session_context() as session:
            trips = (
                session.query(Trip)
                .filter(Trip.owner_id == owner_id)
                .order_by(Trip.departure_time, Trip.trip_id)
                .all()
            )
            return [TripModel.model_validate(t) for t in trips]

    def get(self, owner_id: int, trip_id: int) -> TripModel:
        with self.db.get_session_context() as session:
            return TripModel.model_validate(load_owned_trip(session, owner_id, trip_id))

    def route(self, owner_id: int, trip_id: int) -> RouteModel:
        """
        Map geometry of a trip.

        Raises:
            TripNotFoundError: If the trip is not owned by the caller
            AirportNotFoundError: If an airport code is no longer in the catalog
        """
        trip = self.get(owner_id, trip_id)
        return self.cost_estimator.route(trip.departure_airport, trip.arrival_airport)

    def _estimate_costs(self, departure_airport: str, arrival_airport: str, num_engines: int) -> CostEstimate:
        try:
            return self.cost_estimator.estimate(departure_airport, arrival_airport, num_engines)
        except (AirportNotFoundError, InvalidAircraftError) as e:
            logger.warning(f"Cost estimation failed for {departure_airport}->{arrival_airport}: {e.message}")
            raise CostEstimationError(f"Could not calculate trip cost: {e.message}") from e

    def create(self, owner_id: int, data: TripCreate) -> TripModel:
        """
        Schedule a trip.

        Raises:
            ValidationError: If an airport code is blank
            AircraftNotFoundError: If the plane is not owned by the caller
            PilotNotFoundError: If a pilot is given but not owned by the caller
            CostEstimationError: If either airport is unknown or the plane has no engines
        """
        require_text(departure_airport=data.departure_airport, arrival_airport=data.arrival_airport)

        with self.db.get_session_context() as session:
            plane = load_owned_plane(session, owner_id, data.plane_id)
            if data.pilot_id is not None:
                load_owned_pilot(session, owner_id, data.pilot_id)

            costs = self._estimate_costs(data.departure_airport, data.arrival_airport, plane.num_engines)

            trip = Trip(
                owner_id=owner_id,
                plane_id=plane.plane_id,
                pilot_id=data.pilot_id,
                departure_airport=data.departure_airport,
                arrival_airport=data.arrival_airport,
                departure_time=data.departure_time,
                estimated_arrival_time=estimate_arrival_time(data.departure_time),
                status=TripStatus.SCHEDULED.value,
                estimated_fuel_cost=costs.fuel_cost,
                estimated_total_cost=costs.total_cost,
            )
            session.add(trip)
            session.flush()
            result = TripModel.model_validate(trip)

        logger.info(
            f"Created trip {result.trip_id} {result.departure_airport}->{result.arrival_airport} "
            f"for account {owner_id} (total ${result.estimated_total_cost})"
        )
        return result

    def update(self, owner_id: int, trip_id: int, patch: TripPatch) -> TripModel:
        """
        Apply a partial update.

        Costs are recomputed only when the departure airport, arrival airport
        or plane actually changes. Moving to ``departed``/``arrived`` stamps
        the matching actual time when it is not already set.

        Raises:
            ValidationError: If the patch is empty or blanks an airport code
            TripNotFoundError: If the trip is not owned by the caller
            AircraftNotFoundError / PilotNotFoundError: If a new plane or pilot is not owned by the caller
            InvalidStateError: If the status would move backwards
            CostEstimationError: If the changed route or plane cannot be costed
        """
        if patch.is_empty():
            raise ValidationError("No fields to update")
        changes = patch.changes()
        require_text(**{k: v for k, v in changes.items() if k in ("departure_airport", "arrival_airport")})

        with self.db.get_session_context() as session:
            trip = load_owned_trip(session, owner_id, trip_id)
            previous_status = TripStatus(trip.status)
            new_status = changes.get("status", previous_status)

            if new_status.rank < previous_status.rank:
                raise InvalidStateError(
                    f"Trip {trip_id} cannot move from {previous_status.value} back to {new_status.value}"
                )

            if changes.get("pilot_id") is not None and changes["pilot_id"] != trip.pilot_id:
                load_owned_pilot(session, owner_id, changes["pilot_id"])

            costs: Optional[CostEstimate] = None
            if any(name in changes and changes[name] != getattr(trip, name) for name in _COST_INPUTS):
                plane = load_owned_plane(session, owner_id, changes.get("plane_id", trip.plane_id))
                costs = self._estimate_costs(
                    changes.get("departure_airport", trip.departure_airport),
                    changes.get("arrival_airport", trip.arrival_airport),
                    plane.num_engines,
                )

            for name, value in changes.items():
                setattr(trip, name, value.value if isinstance(value, TripStatus) else value)

            if "departure_time" in changes and "estimated_arrival_time" not in changes:
                trip.estimated_arrival_time = estimate_arrival_time(trip.departure_time)

            if "status" in changes:
                self._stamp_actual_times(trip, new_status)

            if costs is not None:
                trip.estimated_fuel_cost = costs.fuel_cost
                trip.estimated_total_cost = costs.total_cost

            session.flush()
            result = TripModel.model_validate(trip)

        logger.info(f"Updated trip {trip_id} fields {sorted(changes)}{' (costs recomputed)' if costs else ''}")

        if new_status != previous_status:
            self._notify_status_change(result, previous_status)
        return result

    def _stamp_actual_times(self, trip: Trip, status: TripStatus) -> None:
        if status is TripStatus.DEPARTED and trip.actual_departure_time is None:
            trip.actual_departure_time = self.clock()
        elif status is TripStatus.ARRIVED and trip.actual_arrival_time is None:
            trip.actual_arrival_time = self.clock()

    def _notify_status_change(self, trip: TripModel, previous_status: TripStatus) -> None:
        logger.info(f"Trip {trip.trip_id} status {previous_status.value} -> {trip.status.value}")
        for listener in self._status_listeners:
            try:
                listener(trip, previous_status)
            except Exception:
                # update is already committed
                logger.exception(f"Trip status listener failed for trip {trip.trip_id}")

    def delete(self, owner_id: int, trip_id: int) -> None:
        """
        Delete a trip that has not departed.

        Raises:
            TripNotFoundError: If the trip is not owned by the caller
            InvalidStateError: If the trip is departed or arrived
        """
        with self.db.get_session_context() as session:
            trip = load_owned_trip(session, owner_id, trip_id)
            status = TripStatus(trip.status)
            if not status.is_deletable:
                raise InvalidStateError(f"Trip {trip_id} is {status.value} and cannot be deleted")
            session.delete(trip)

        logger.info(f"Deleted trip {trip_id} for account {owner_id}")
