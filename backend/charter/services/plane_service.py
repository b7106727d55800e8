"""
Plane records: owner-scoped CRUD with a referential-integrity guard on delete.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from ..database.config import DatabaseConfig
from ..database.models import Plane, Trip
from ..models.plane import PlaneCreate, PlanePatch, PlaneModel
from .errors import ReferentialConflictError, ValidationError
from .records import load_owned_plane, referencing_trip_ids, require_text

logger = logging.getLogger(__name__)


class PlaneService:
    """Planes registered by an account."""

    def __init__(self, db: DatabaseConfig):
        self.db = db

    def list(self, owner_id: int) -> List[PlaneModel]:
        """Planes of the owner, newest first."""
        with self.db.get_session_context() as session:
            planes = session.query(Plane).filter(Plane.owner_id == owner_id).order_by(Plane.plane_id.desc()).all()
            return [PlaneModel.model_validate(p) for p in planes]

    def get(self, owner_id: int, plane_id: int) -> PlaneModel:
        with self.db.get_session_context() as session:
            return PlaneModel.model_validate(load_owned_plane(session, owner_id, plane_id))

    def create(self, owner_id: int, data: PlaneCreate) -> PlaneModel:
        """
        Register a plane.

        Raises:
            ValidationError: If a required field is blank or the tail number is taken
        """
        require_text(tail_number=data.tail_number, model=data.model, manufacturer=data.manufacturer)

        try:
            with self.db.get_session_context() as session:
                plane = Plane(owner_id=owner_id, **data.model_dump())
                session.add(plane)
                session.flush()
                result = PlaneModel.model_validate(plane)
        except IntegrityError:
            raise ValidationError(f"Tail number already registered: {data.tail_number}")

        logger.info(f"Created plane {result.plane_id} ({result.tail_number}) for account {owner_id}")
        return result

    def update(self, owner_id: int, plane_id: int, patch: PlanePatch) -> PlaneModel:
        """
        Apply a partial update.

        Raises:
            ValidationError: If the patch is empty, blanks a required field or reuses a tail number
            AircraftNotFoundError: If the plane is not owned by the caller
        """
        if patch.is_empty():
            raise ValidationError("No fields to update")
        changes = patch.changes()
        require_text(**{k: v for k, v in changes.items() if k in ("tail_number", "model", "manufacturer")})

        try:
            with self.db.get_session_context() as session:
                plane = load_owned_plane(session, owner_id, plane_id)
                patch.apply_to(plane)
                session.flush()
                result = PlaneModel.model_validate(plane)
        except IntegrityError:
            raise ValidationError(f"Tail number already registered: {changes.get('tail_number')}")

        logger.info(f"Updated plane {plane_id} fields {sorted(changes)}")
        return result

    def delete(self, owner_id: int, plane_id: int) -> None:
        """
        Delete a plane that no trip references.

        Raises:
            AircraftNotFoundError: If the plane is not owned by the caller
            ReferentialConflictError: If any trip, in any status, references the plane
        """
        with self.db.get_session_context() as session:
            plane = load_owned_plane(session, owner_id, plane_id)
            trip_ids = referencing_trip_ids(session, Trip.plane_id, plane_id)
            if trip_ids:
                raise ReferentialConflictError(
                    f"Cannot delete plane {plane_id} with associated trips", trip_ids=trip_ids
                )
            session.delete(plane)

        logger.info(f"Deleted plane {plane_id} for account {owner_id}")
