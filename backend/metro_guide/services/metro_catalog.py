"""Metro Catalog — read queries for lines, stations, categories, and attractions.

Invariants:
    - Station ordering: popularity_score desc, then name asc
    - Every station returned carries its line and its attractions
    - Every attraction returned carries its station (with line) and its category
    - Search is capped at SEARCH_RESULTS_CAP rows

Design Decisions:
    - Attractions for a page of stations come from one selectinload IN query,
      not one query per station
    - Random pick is ORDER BY random() LIMIT 1: fine for a few hundred stations
    - Search uses LIKE with autoescape so '%' and '_' in user input match literally;
      case sensitivity follows the store collation
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from metro_guide.core.domain_types import (
    Language, POPULAR_STATIONS_LIMIT, RECOMMENDED_LIMIT,
    SEARCH_RESULTS_CAP, STATION_PAGE_SIZE,
)
from metro_guide.models.attraction import Attraction
from metro_guide.models.category import Category
from metro_guide.models.metro_line import MetroLine
from metro_guide.models.station import Station

logger = logging.getLogger(__name__)


def search_column(language: str):
    """Arabic searches match name_ar; anything else matches name."""
    return Station.name_ar if language == Language.AR.value else Station.name


def _stations_query() -> Select:
    return select(Station).options(selectinload(Station.attractions))


class MetroCatalog:
    """Read-only access to the transit reference data."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Lines ───────────────────────────────────────────────────

    async def list_lines(self) -> list[MetroLine]:
        result = await self.db.execute(
            select(MetroLine).order_by(MetroLine.id.asc()),
        )
        return list(result.scalars().all())

    async def get_line_by_code(self, code: str) -> MetroLine | None:
        result = await self.db.execute(
            select(MetroLine).where(MetroLine.line_code == code),
        )
        line = result.scalar_one_or_none()
        if line is None:
            logger.info("Unknown metro line code", extra={"line_code": code})
        return line

    # ─── Stations ────────────────────────────────────────────────

    async def list_stations(
        self,
        line_id: int | None = None,
        limit: int = STATION_PAGE_SIZE,
        offset: int = 0,
    ) -> list[Station]:
        query = _stations_query().order_by(
            Station.popularity_score.desc(), Station.name.asc(),
        )
        if line_id is not None:
            query = query.where(Station.line_id == line_id)
        query = query.limit(limit).offset(offset)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_station(self, station_id: int) -> Station | None:
        result = await self.db.execute(
            _stations_query().where(Station.id == station_id),
        )
        station = result.scalar_one_or_none()
        if station is None:
            logger.info("Unknown station id", extra={"station_id": station_id})
        return station

    async def popular_stations(
        self, limit: int = POPULAR_STATIONS_LIMIT,
    ) -> list[Station]:
        return await self.list_stations(None, limit, 0)

    async def search_stations(
        self, query: str, language: str = Language.AR.value,
    ) -> list[Station]:
        column = search_column(language)
        result = await self.db.execute(
            _stations_query()
            .where(column.contains(query, autoescape=True))
            .order_by(Station.id.asc())
            .limit(SEARCH_RESULTS_CAP),
        )
        stations = list(result.scalars().all())
        logger.debug(
            f"Station search matched {len(stations)} rows",
            extra={"limit": SEARCH_RESULTS_CAP},
        )
        return stations

    async def random_station(self) -> Station | None:
        result = await self.db.execute(
            _stations_query().order_by(func.random()).limit(1),
        )
        return result.scalar_one_or_none()

    # ─── Categories ──────────────────────────────────────────────

    async def list_categories(self) -> list[Category]:
        result = await self.db.execute(
            select(Category).order_by(Category.name.asc()),
        )
        return list(result.scalars().all())

    # ─── Attractions ─────────────────────────────────────────────

    async def attractions_by_station(self, station_id: int) -> list[Attraction]:
        result = await self.db.execute(
            select(Attraction)
            .where(Attraction.station_id == station_id)
            .order_by(Attraction.id.asc()),
        )
        return list(result.scalars().all())

    async def attractions_by_category(self, category_id: int) -> list[Attraction]:
        result = await self.db.execute(
            select(Attraction)
            .where(Attraction.category_id == category_id)
            .order_by(Attraction.id.asc()),
        )
        attractions = list(result.scalars().all())
        logger.debug(
            f"Category lookup matched {len(attractions)} attractions",
            extra={"category_id": category_id},
        )
        return attractions

    async def recommended_attractions(
        self, limit: int = RECOMMENDED_LIMIT,
    ) -> list[Attraction]:
        result = await self.db.execute(
            select(Attraction)
            .where(Attraction.is_recommended.is_(True))
            .order_by(Attraction.id.asc())
            .limit(limit),
        )
        return list(result.scalars().all())

    async def top_rated_in_categories(
        self, category_ids: list[int], limit: int,
    ) -> list[Attraction]:
        """Attractions in any of category_ids, best rated first, id breaking ties."""
        result = await self.db.execute(
            select(Attraction)
            .where(Attraction.category_id.in_(category_ids))
            .order_by(Attraction.rating.desc().nulls_last(), Attraction.id.asc())
            .limit(limit),
        )
        return list(result.scalars().all())
