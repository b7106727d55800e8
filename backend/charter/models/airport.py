"""
Airport-related Pydantic models for the charter backend.

Coordinates handed to the map layer are always ``[longitude, latitude]``.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class AirportModel(BaseModel):
    """Reference airport, immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    icao: str = Field(..., max_length=4, description="ICAO airport code")
    iata: Optional[str] = Field(None, max_length=3, description="IATA airport code")
    name: str = Field(..., description="Airport name")
    city: str = Field("", description="City served")
    country: str = Field("", description="Country")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    elevation_feet: int = Field(0, description="Field elevation in feet")

    @property
    def coordinates(self) -> List[float]:
        return [self.longitude, self.latitude]


class AirportSearchResult(BaseModel):
    """Airport search hit shaped for direct map rendering."""

    icao: str
    iata: Optional[str] = None
    name: str
    city: str
    country: str
    coordinates: List[float] = Field(..., description="[longitude, latitude]")

    @classmethod
    def from_airport(cls, airport: AirportModel) -> "AirportSearchResult":
        return cls(
            icao=airport.icao,
            iata=airport.iata,
            name=airport.name,
            city=airport.city,
            country=airport.country,
            coordinates=airport.coordinates,
        )


class RouteModel(BaseModel):
    """Great-circle route between two airports for drawing a trip on the map."""

    departure: AirportSearchResult
    arrival: AirportSearchResult
    distance_nm: float = Field(..., ge=0, description="Great-circle distance in nautical miles")
