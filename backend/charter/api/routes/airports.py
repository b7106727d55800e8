"""Airport search for the trip form and map."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from ..dependencies import get_current_account, get_services
from ...models.airport import AirportModel, AirportSearchResult
from ...services import CharterServices

router = APIRouter(prefix="/airports", tags=["airports"], dependencies=[Depends(get_current_account)])


@router.get("/search", response_model=List[AirportSearchResult])
def search_airports(
    request: Request,
    query: str = Query("", description="ICAO, IATA, name or city fragment"),
    limit: Optional[int] = Query(None, ge=1, le=100),
    services: CharterServices = Depends(get_services),
):
    """Matching airports; queries shorter than two characters return an empty list."""
    return services.catalog.search(query, limit or request.app.state.search_limit)


@router.get("/{icao}", response_model=AirportModel)
def get_airport(icao: str, services: CharterServices = Depends(get_services)):
    return services.catalog.lookup_by_code(icao)
