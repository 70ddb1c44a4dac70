"""Categories — the attraction classification list, name ascending."""

from fastapi import APIRouter, Depends

from metro_guide.api.routes.route_helpers import endpoint_guard, get_catalog
from metro_guide.schemas.catalog import CategoryOut
from metro_guide.services.metro_catalog import MetroCatalog

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryOut])
async def list_categories(catalog: MetroCatalog = Depends(get_catalog)):
    with endpoint_guard("Failed to fetch categories"):
        categories = await catalog.list_categories()
        return [CategoryOut.model_validate(c) for c in categories]
