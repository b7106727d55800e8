"""Pilot CRUD for the calling account."""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_current_account, get_services
from ...models.account import AccountModel
from ...models.pilot import PilotCreate, PilotPatch, PilotModel
from ...services import CharterServices

router = APIRouter(prefix="/pilots", tags=["pilots"])


@router.get("", response_model=List[PilotModel])
def list_pilots(
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.pilots.list(account.account_id)


@router.post("", response_model=PilotModel, status_code=201)
def create_pilot(
    data: PilotCreate,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.pilots.create(account.account_id, data)


@router.get("/{pilot_id}", response_model=PilotModel)
def get_pilot(
    pilot_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.pilots.get(account.account_id, pilot_id)


@router.put("/{pilot_id}", response_model=PilotModel)
def update_pilot(
    pilot_id: int,
    patch: PilotPatch,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.pilots.update(account.account_id, pilot_id, patch)


@router.delete("/{pilot_id}")
def delete_pilot(
    pilot_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    services.pilots.delete(account.account_id, pilot_id)
    return {"message": "Pilot deleted successfully"}
