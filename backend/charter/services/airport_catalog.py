"""
In-memory airport reference catalog.

The catalog is built once at startup by ``load_airport_catalog`` and then
passed to every consumer; it is never mutated afterwards, so concurrent
readers need no locking.

Two file layouts are understood:
- A headed CSV with ``icao,iata,name,city,country,lat,lon,elevation_ft``
- The headerless OpenFlights ``airports.dat`` export (selected by the
  ``.dat`` suffix), which marks nulls with ``\\N``
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

import polars as pl

from ..models.airport import AirportModel, AirportSearchResult
from .errors import AirportNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10
MIN_QUERY_LENGTH = 2

# OpenFlights airports.dat column order (no header row)
OPENFLIGHTS_COLUMNS = [
    "airport_id_openflights",
    "name",
    "city",
    "country",
    "iata",
    "icao",
    "latitude",
    "longitude",
    "altitude",
    "timezone_offset",
    "dst",
    "timezone_name",
    "type",
    "source",
]

_TEXT_COLUMNS = ["icao", "iata", "name", "city", "country"]


class AirportCatalog:
    """
    Read-only airport table with exact ICAO lookup and substring search.

    Airports keep the order they were loaded in, and search results follow
    that order. Duplicate ICAO codes keep the first occurrence.
    """

    def __init__(self, airports: Iterable[AirportModel] = ()):
        self._airports: List[AirportModel] = []
        self._by_icao: Dict[str, AirportModel] = {}
        for airport in airports:
            if airport.icao in self._by_icao:
                logger.debug(f"Skipping duplicate airport {airport.icao}")
                continue
            self._by_icao[airport.icao] = airport
            self._airports.append(airport)

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[AirportModel]:
        return iter(self._airports)

    def __contains__(self, icao: object) -> bool:
        return isinstance(icao, str) and icao.strip().upper() in self._by_icao

    def find(self, icao: Optional[str]) -> Optional[AirportModel]:
        """Exact ICAO lookup, or None when absent."""
        if not icao:
            return None
        return self._by_icao.get(icao.strip().upper())

    def lookup_by_code(self, icao: Optional[str]) -> AirportModel:
        """
        Exact ICAO lookup.

        Raises:
            AirportNotFoundError: If the code is not in the catalog
        """
        airport = self.find(icao)
        if airport is None:
            raise AirportNotFoundError(icao or "")
        return airport

    def search(self, query: Optional[str], limit: int = DEFAULT_SEARCH_LIMIT) -> List[AirportSearchResult]:
        """
        Case-insensitive substring search over ICAO, IATA, name and city.

        Queries shorter than two characters return an empty list rather than
        scanning the table for keystroke-level input.

        Args:
            query: Search text
            limit: Maximum number of results

        Returns:
            Matching airports with ``[longitude, latitude]`` coordinates
        """
        needle = (query or "").strip().upper()
        if len(needle) < MIN_QUERY_LENGTH or limit <= 0:
            return []

        results: List[AirportSearchResult] = []
        for airport in self._airports:
            if _matches(airport, needle):
                results.append(AirportSearchResult.from_airport(airport))
                if len(results) >= limit:
                    break
        return results


def _matches(airport: AirportModel, needle: str) -> bool:
    return (
        needle in airport.icao
        or (airport.iata is not None and needle in airport.iata.upper())
        or needle in airport.name.upper()
        or needle in airport.city.upper()
    )


def _read_frame(path: Path) -> pl.DataFrame:
    """Read the reference file into a frame with the catalog's column names, all as text."""
    if path.suffix.lower() == ".dat":
        df = pl.read_csv(
            path,
            has_header=False,
            new_columns=OPENFLIGHTS_COLUMNS,
            null_values=["\\N", ""],
            infer_schema_length=0,
        )
        return df.rename({"latitude": "lat", "longitude": "lon", "altitude": "elevation_ft"})

    df = pl.read_csv(path, null_values=["\\N", ""], infer_schema_length=0)
    missing = [c for c in _TEXT_COLUMNS + ["lat", "lon", "elevation_ft"] if c not in df.columns]
    if missing:
        df = df.with_columns([pl.lit(None, dtype=pl.Utf8).alias(c) for c in missing])
    return df


def parse_airports(path: Union[str, Path]) -> List[AirportModel]:
    """
    Parse a reference file into airports.

    Rows without an ICAO code or with missing or out-of-range coordinates
    are dropped.
    """
    df = _read_frame(Path(path))
    total = df.height

    df = (
        df.with_columns(
            pl.col("icao").str.strip_chars().str.to_uppercase(),
            pl.col("iata").str.strip_chars().str.to_uppercase(),
            pl.col("lat").cast(pl.Float64, strict=False),
            pl.col("lon").cast(pl.Float64, strict=False),
            pl.col("elevation_ft").cast(pl.Float64, strict=False).fill_null(0).round(0).cast(pl.Int64),
        )
        .filter(
            pl.col("icao").is_not_null()
            & (pl.col("icao").str.len_chars() > 0)
            & (pl.col("icao").str.len_chars() <= 4)
            & pl.col("lat").is_between(-90.0, 90.0)
            & pl.col("lon").is_between(-180.0, 180.0)
        )
    )

    if df.height < total:
        logger.info(f"Skipped {total - df.height} airport rows without usable ICAO code or coordinates")

    airports = []
    for row in df.select(_TEXT_COLUMNS + ["lat", "lon", "elevation_ft"]).iter_rows(named=True):
        iata = row["iata"] if row["iata"] and len(row["iata"]) == 3 else None
        airports.append(
            AirportModel(
                icao=row["icao"],
                iata=iata,
                name=row["name"] or row["icao"],
                city=row["city"] or "",
                country=row["country"] or "",
                latitude=row["lat"],
                longitude=row["lon"],
                elevation_feet=row["elevation_ft"],
            )
        )
    return airports


def load_airport_catalog(path: Union[str, Path]) -> AirportCatalog:
    """
    Build the airport catalog from a reference file.

    A missing file is not fatal: the catalog starts empty and every lookup
    fails with AirportNotFoundError.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Airports data file not found: {path}; starting with an empty catalog")
        return AirportCatalog()

    catalog = AirportCatalog(parse_airports(path))
    logger.info(f"Loaded {len(catalog)} airports from {path}")
    return catalog


__all__ = [
    'AirportCatalog',
    'load_airport_catalog',
    'parse_airports',
    'DEFAULT_SEARCH_LIMIT',
    'MIN_QUERY_LENGTH',
]
