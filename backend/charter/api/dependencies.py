"""
FastAPI dependencies: wired services and the calling account.

Authentication happens upstream; this layer trusts the ``X-Account-ID``
header and only checks that it names an existing account.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from starlette.status import HTTP_401_UNAUTHORIZED

from ..models.account import AccountModel
from ..services import CharterServices
from ..services.errors import AccountNotFoundError


def get_services(request: Request) -> CharterServices:
    return request.app.state.services


def get_current_account(
    x_account_id: Optional[int] = Header(None, description="Authenticated account id"),
    services: CharterServices = Depends(get_services),
) -> AccountModel:
    if x_account_id is None:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing X-Account-ID header")
    try:
        return services.accounts.get(x_account_id)
    except AccountNotFoundError:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Unknown account")
