"""Plane CRUD for the calling account."""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_current_account, get_services
from ...models.account import AccountModel
from ...models.plane import PlaneCreate, PlanePatch, PlaneModel
from ...services import CharterServices

router = APIRouter(prefix="/planes", tags=["planes"])


@router.get("", response_model=List[PlaneModel])
def list_planes(
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.planes.list(account.account_id)


@router.post("", response_model=PlaneModel, status_code=201)
def create_plane(
    data: PlaneCreate,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.planes.create(account.account_id, data)


@router.get("/{plane_id}", response_model=PlaneModel)
def get_plane(
    plane_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.planes.get(account.account_id, plane_id)


@router.put("/{plane_id}", response_model=PlaneModel)
def update_plane(
    plane_id: int,
    patch: PlanePatch,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    return services.planes.update(account.account_id, plane_id, patch)


@router.delete("/{plane_id}")
def delete_plane(
    plane_id: int,
    account: AccountModel = Depends(get_current_account),
    services: CharterServices = Depends(get_services),
):
    services.planes.delete(account.account_id, plane_id)
    return {"message": "Plane deleted successfully"}
