"""Stations — paging, popularity, search, random pick, and lookup by id.

Invariants:
    - Every response station embeds its line and attractions (StationWithLine)
    - /popular, /search, /random are declared before /{station_id} so the
      fixed paths are never parsed as ids
    - /search without a non-empty q is 400 "Search query is required"
"""

from fastapi import APIRouter, Depends, Query

from metro_guide.api.routes.route_helpers import endpoint_guard, get_catalog
from metro_guide.core.domain_types import (
    Language, POPULAR_STATIONS_LIMIT, STATION_PAGE_SIZE,
)
from metro_guide.core.errors import InvalidInputError, ResourceNotFoundError
from metro_guide.models.station import Station
from metro_guide.schemas.catalog import StationWithLine
from metro_guide.services.metro_catalog import MetroCatalog

router = APIRouter(prefix="/stations", tags=["stations"])


def _to_response(stations: list[Station]) -> list[StationWithLine]:
    return [StationWithLine.model_validate(s) for s in stations]


@router.get("", response_model=list[StationWithLine])
async def list_stations(
    line_id: int | None = Query(None, alias="lineId"),
    limit: int = Query(STATION_PAGE_SIZE, ge=1),
    offset: int = Query(0, ge=0),
    catalog: MetroCatalog = Depends(get_catalog),
):
    """Stations by popularity desc then name asc, optionally for one line."""
    with endpoint_guard("Failed to fetch stations"):
        stations = await catalog.list_stations(line_id, limit, offset)
        return _to_response(stations)


@router.get("/popular", response_model=list[StationWithLine])
async def popular_stations(
    limit: int = Query(POPULAR_STATIONS_LIMIT, ge=1),
    catalog: MetroCatalog = Depends(get_catalog),
):
    with endpoint_guard("Failed to fetch popular stations", limit=limit):
        stations = await catalog.popular_stations(limit)
        return _to_response(stations)


@router.get("/search", response_model=list[StationWithLine])
async def search_stations(
    q: str | None = Query(None),
    lang: str = Query(Language.AR.value),
    catalog: MetroCatalog = Depends(get_catalog),
):
    """Substring match on the Arabic name (lang=ar) or the default name."""
    if not q:
        raise InvalidInputError("Search query is required", field="q")
    with endpoint_guard("Failed to search stations"):
        stations = await catalog.search_stations(q, lang)
        return _to_response(stations)


@router.get("/random", response_model=StationWithLine)
async def random_station(catalog: MetroCatalog = Depends(get_catalog)):
    with endpoint_guard("Failed to get random station"):
        station = await catalog.random_station()
        if not station:
            raise ResourceNotFoundError("No stations available")
        return StationWithLine.model_validate(station)


@router.get("/{station_id}", response_model=StationWithLine)
async def get_station(
    station_id: int, catalog: MetroCatalog = Depends(get_catalog),
):
    with endpoint_guard("Failed to fetch station", station_id=station_id):
        station = await catalog.get_station(station_id)
        if not station:
            raise ResourceNotFoundError("Station not found")
        return StationWithLine.model_validate(station)
