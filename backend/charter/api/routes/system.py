"""Health check and account registration."""

from fastapi import APIRouter, Depends

from ..dependencies import get_current_account, get_services
from ...models.account import AccountCreate, AccountModel
from ...services import CharterServices

router = APIRouter(tags=["system"])


@router.get("/health")
def health(services: CharterServices = Depends(get_services)):
    return {"status": "ok", "airports": len(services.catalog)}


@router.post("/accounts", response_model=AccountModel, status_code=201)
def register_account(data: AccountCreate, services: CharterServices = Depends(get_services)):
    """Register a company account (unauthenticated)."""
    return services.accounts.register(data)


@router.get("/accounts/me", response_model=AccountModel)
def current_account(account: AccountModel = Depends(get_current_account)):
    return account
