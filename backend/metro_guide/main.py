"""Metro Guide API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix (no auto-discovery)
    - Global error handlers map every failure to {"message": ...} JSON
    - CORS configured from settings; the session header is exposed to browsers
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py; this module is wiring only
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from metro_guide.api.error_handlers import register_error_handlers
from metro_guide.api.routes import (
    attractions, categories, health, lines, stations, user,
)
from metro_guide.config import get_settings
from metro_guide.infrastructure import database
from metro_guide.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Metro Guide API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Metro Guide API shutting down")


app = FastAPI(
    title="Metro Guide API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[settings.session_header],
)

for module in (health, lines, stations, categories, attractions, user):
    app.include_router(module.router, prefix=settings.api_prefix)

register_error_handlers(app)
