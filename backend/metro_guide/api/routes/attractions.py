"""Attractions — by station, by category, and the globally recommended set.

Invariants:
    - Every attraction embeds its station (with line) and category
    - Unknown station/category ids yield an empty list, not 404
"""

from fastapi import APIRouter, Depends, Query

from metro_guide.api.routes.route_helpers import endpoint_guard, get_catalog
from metro_guide.core.domain_types import RECOMMENDED_LIMIT
from metro_guide.models.attraction import Attraction
from metro_guide.schemas.catalog import AttractionWithDetails
from metro_guide.services.metro_catalog import MetroCatalog

router = APIRouter(prefix="/attractions", tags=["attractions"])


def to_details(attractions: list[Attraction]) -> list[AttractionWithDetails]:
    return [AttractionWithDetails.model_validate(a) for a in attractions]


@router.get("/recommended", response_model=list[AttractionWithDetails])
async def recommended_attractions(
    limit: int = Query(RECOMMENDED_LIMIT, ge=1),
    catalog: MetroCatalog = Depends(get_catalog),
):
    with endpoint_guard("Failed to fetch recommended attractions", limit=limit):
        return to_details(await catalog.recommended_attractions(limit))


@router.get("/station/{station_id}", response_model=list[AttractionWithDetails])
async def attractions_by_station(
    station_id: int, catalog: MetroCatalog = Depends(get_catalog),
):
    with endpoint_guard("Failed to fetch attractions", station_id=station_id):
        return to_details(await catalog.attractions_by_station(station_id))


@router.get("/category/{category_id}", response_model=list[AttractionWithDetails])
async def attractions_by_category(
    category_id: int, catalog: MetroCatalog = Depends(get_catalog),
):
    with endpoint_guard(
        "Failed to fetch attractions by category", category_id=category_id,
    ):
        return to_details(await catalog.attractions_by_category(category_id))
