"""Metro Lines — list all lines and look one up by its short code."""

from fastapi import APIRouter, Depends

from metro_guide.api.routes.route_helpers import endpoint_guard, get_catalog
from metro_guide.core.errors import ResourceNotFoundError
from metro_guide.schemas.catalog import MetroLineOut
from metro_guide.services.metro_catalog import MetroCatalog

router = APIRouter(prefix="/lines", tags=["lines"])


@router.get("", response_model=list[MetroLineOut])
async def list_lines(catalog: MetroCatalog = Depends(get_catalog)):
    """All lines, id ascending."""
    with endpoint_guard("Failed to fetch metro lines"):
        lines = await catalog.list_lines()
        return [MetroLineOut.model_validate(line) for line in lines]


@router.get("/{code}", response_model=MetroLineOut)
async def get_line(code: str, catalog: MetroCatalog = Depends(get_catalog)):
    with endpoint_guard("Failed to fetch metro line", line_code=code):
        line = await catalog.get_line_by_code(code)
        if not line:
            raise ResourceNotFoundError("Metro line not found")
        return MetroLineOut.model_validate(line)
