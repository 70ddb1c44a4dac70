"""Service test fixtures — async DB + FastAPI test client + seeded reference data.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - seed_catalog inserts a small fixed network with explicit ids

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (row locks and collations are PostgreSQL concerns not exercised here)
    - Reference rows linked by id columns, not relationships, so seeding never
      touches the lazy="raise" Station.attractions collection
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from metro_guide.db.base import Base
from metro_guide.infrastructure.database import get_db, DatabaseSessionManager
from metro_guide.models import Attraction, Category, MetroLine, Station
import metro_guide.infrastructure.database as db_module
from metro_guide.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_catalog(test_db):
    """Two lines, three categories, five stations, five attractions.

    Station popularity: King Fahd 90, Airport 75, Olaya 75, Museum Square 40,
    Depot 10 (Depot has no line). Category 2 (Museums) holds attractions
    2 (4.8), 3 (4.6), 5 (4.6). Recommended: 1, 2, 4.
    """
    test_db.add_all([
        MetroLine(id=1, name="Blue Line", name_ar="المسار الأزرق", color="#0066CC", line_code="blue"),
        MetroLine(id=2, name="Red Line", name_ar="المسار الأحمر", color="#E31837", line_code="red"),
        Category(id=1, name="Restaurants", name_ar="مطاعم", icon="utensils", color="#F97316"),
        Category(id=2, name="Museums", name_ar="متاحف", icon="landmark", color="#8B5CF6"),
        Category(id=3, name="Cafes", name_ar="مقاهي", icon="coffee", color="#A16207"),
    ])
    await test_db.flush()
    test_db.add_all([
        Station(id=1, name="King Fahd", name_ar="الملك فهد", line_id=1,
                latitude=24.7136, longitude=46.6753, walking_time=5,
                popularity_score=90, is_popular=True, is_trending=True),
        Station(id=2, name="Olaya", name_ar="العليا", line_id=1,
                walking_time=3, popularity_score=75, is_popular=True),
        Station(id=3, name="Airport", name_ar="المطار", line_id=2,
                walking_time=8, popularity_score=75),
        Station(id=4, name="Museum Square", name_ar="ساحة المتحف", line_id=2,
                walking_time=4, popularity_score=40, is_trending=True),
        Station(id=5, name="Depot", name_ar="المستودع", line_id=None,
                popularity_score=10),
    ])
    await test_db.flush()
    test_db.add_all([
        Attraction(id=1, name="Najd Village", name_ar="قرية نجد", station_id=1,
                   category_id=1, rating=Decimal("4.5"), walking_time_from_station=6,
                   is_recommended=True),
        Attraction(id=2, name="National Museum", name_ar="المتحف الوطني", station_id=4,
                   category_id=2, rating=Decimal("4.8"), walking_time_from_station=2,
                   video_url="https://example.com/museum.mp4", video_duration="2:30",
                   is_recommended=True),
        Attraction(id=3, name="Masmak Fort", name_ar="قصر المصمك", station_id=4,
                   category_id=2, rating=Decimal("4.6"), is_recommended=False),
        Attraction(id=4, name="Olaya Cafe", name_ar="مقهى العليا", station_id=2,
                   category_id=3, rating=Decimal("4.2"), is_recommended=True),
        Attraction(id=5, name="History Hall", name_ar="قاعة التاريخ", station_id=2,
                   category_id=2, rating=Decimal("4.6"), is_recommended=False),
    ])
    await test_db.commit()
