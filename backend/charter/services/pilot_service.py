"""
Pilot records: owner-scoped CRUD with a referential-integrity guard on delete.
"""

import logging
from typing import List

from ..database.config import DatabaseConfig
from ..database.models import Pilot, Trip
from ..models.pilot import PilotCreate, PilotPatch, PilotModel
from .errors import ReferentialConflictError, ValidationError
from .records import load_owned_pilot, referencing_trip_ids, require_text

logger = logging.getLogger(__name__)


class PilotService:
    """Pilots registered by an account."""

    def __init__(self, db: DatabaseConfig):
        self.db = db

    def list(self, owner_id: int) -> List[PilotModel]:
        """Pilots of the owner ordered by name."""
        with self.db.get_session_context() as session:
            pilots = session.query(Pilot).filter(Pilot.owner_id == owner_id).order_by(Pilot.name, Pilot.pilot_id).all()
            return [PilotModel.model_validate(p) for p in pilots]

    def get(self, owner_id: int, pilot_id: int) -> PilotModel:
        with self.db.get_session_context() as session:
            return PilotModel.model_validate(load_owned_pilot(session, owner_id, pilot_id))

    def create(self, owner_id: int, data: PilotCreate) -> PilotModel:
        """
        Raises:
            ValidationError: If name or license number is blank
        """
        require_text(name=data.name, license_number=data.license_number)

        with self.db.get_session_context() as session:
            pilot = Pilot(owner_id=owner_id, **data.model_dump())
            session.add(pilot)
            session.flush()
            result = PilotModel.model_validate(pilot)

        logger.info(f"Created pilot {result.pilot_id} ({result.name}) for account {owner_id}")
        return result

    def update(self, owner_id: int, pilot_id: int, patch: PilotPatch) -> PilotModel:
        """
        Raises:
            ValidationError: If the patch is empty or blanks a required field
            PilotNotFoundError: If the pilot is not owned by the caller
        """
        if patch.is_empty():
            raise ValidationError("No fields to update")
        changes = patch.changes()
        require_text(**{k: v for k, v in changes.items() if k in ("name", "license_number")})

        with self.db.get_session_context() as session:
            pilot = load_owned_pilot(session, owner_id, pilot_id)
            patch.apply_to(pilot)
            session.flush()
            result = PilotModel.model_validate(pilot)

        logger.info(f"Updated pilot {pilot_id} fields {sorted(changes)}")
        return result

    def delete(self, owner_id: int, pilot_id: int) -> None:
        """
        Delete a pilot that no trip references.

        Raises:
            PilotNotFoundError: If the pilot is not owned by the caller
            ReferentialConflictError: If any trip, in any status, references the pilot
        """
        with self.db.get_session_context() as session:
            pilot = load_owned_pilot(session, owner_id, pilot_id)
            trip_ids = referencing_trip_ids(session, Trip.pilot_id, pilot_id)
            if trip_ids:
                raise ReferentialConflictError(
                    f"Cannot delete pilot {pilot_id} with associated trips", trip_ids=trip_ids
                )
            session.delete(pilot)

        logger.info(f"Deleted pilot {pilot_id} for account {owner_id}")
