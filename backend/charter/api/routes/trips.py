"""Trip CRUD, status transitions and map routes for the calling account."""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_current_account, get_services
from ...models.account import AccountModel
from ...models.airport import RouteModel
from ...models.trip import TripCreate, TripModel, TripPatch
from ...services import CharterServices

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[TripModel])
def list_trips(
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.trips.list(account.account_id)


@router.post("", response_model=TripModel, status_code=201)
def create_trip(
    data: TripCreate,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    """Schedule a trip; estimated arrival and costs are computed server-side."""
    return services.trips.create(account.account_id, data)


@router.get("/{trip_id}", response_model=TripModel)
def get_trip(
    trip_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.trips.get(account.account_id, trip_id)


@router.get("/{trip_id}/route", response_model=RouteModel)
def get_trip_route(
    trip_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.trips.route(account.account_id, trip_id)


@router.put("/{trip_id}", response_model=TripModel)
def update_trip(
    trip_id: int,
    patch: TripPatch,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    """Partial update, including forward status transitions."""
    return services.trips.update(account.account_id, trip_id, patch)


@router.delete("/{trip_id}")
def delete_trip(
    trip_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    services.trips.delete(account.account_id, trip_id)
    return {"message": "Trip deleted successfully"}
