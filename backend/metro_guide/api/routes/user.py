"""Visitor Routes — preferences, favorites, visited stations, and recommendations.

Invariants:
    - All routes are scoped by the x-session-id token; a fresh token is issued
      (and echoed in the response header) when the request has none
    - DELETE /favorites/{id} is the exception: no token → 400
    - Favorites/visited additions are idempotent; removing an absent id succeeds
    - GET /preferences for an unseen session returns the default shape, and
      does not create a record
    - Path station ids must be positive, as in the preferences body
"""

import logging

from fastapi import APIRouter, Depends, Path, Query

from metro_guide.api.routes.attractions import to_details
from metro_guide.api.routes.route_helpers import (
    endpoint_guard, get_catalog, get_preferences_store,
    required_session_token, session_token,
)
from metro_guide.core.domain_types import PERSONALIZED_LIMIT, SessionToken
from metro_guide.core.preference_lists import default_preferences
from metro_guide.schemas.catalog import AttractionWithDetails
from metro_guide.schemas.preferences import (
    AckResponse, PreferencesOut, PreferencesUpdate,
)
from metro_guide.services.metro_catalog import MetroCatalog
from metro_guide.services.recommendations import personalized_recommendations
from metro_guide.services.user_preferences import PreferencesStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/user", tags=["user"])


@router.get(
    "/preferences", response_model=PreferencesOut,
    response_model_exclude_none=True,
)
async def get_preferences(
    session_id: SessionToken = Depends(session_token),
    store: PreferencesStore = Depends(get_preferences_store),
):
    with endpoint_guard("Failed to fetch user preferences", session_id=session_id):
        prefs = await store.get(session_id)
        if prefs is None:
            return PreferencesOut(**default_preferences(session_id))
        return PreferencesOut.model_validate(prefs)


@router.put(
    "/preferences", response_model=PreferencesOut,
    response_model_exclude_none=True,
)
async def update_preferences(
    body: PreferencesUpdate,
    session_id: SessionToken = Depends(session_token),
    store: PreferencesStore = Depends(get_preferences_store),
):
    """Partial upsert: supplied fields replace stored ones, the rest are kept."""
    with endpoint_guard("Failed to update user preferences", session_id=session_id):
        prefs = await store.upsert(session_id, body.changes())
        logger.info(
            "Preferences updated", extra={"session_id": session_id},
        )
        return PreferencesOut.model_validate(prefs)


@router.post("/favorites/{station_id}", response_model=AckResponse)
async def add_favorite(
    station_id: int = Path(gt=0),
    session_id: SessionToken = Depends(session_token),
    store: PreferencesStore = Depends(get_preferences_store),
):
    with endpoint_guard(
        "Failed to add favorite station",
        session_id=session_id, station_id=station_id,
    ):
        await store.add_favorite(session_id, station_id)
        return AckResponse(message="Station added to favorites")


@router.delete("/favorites/{station_id}", response_model=AckResponse)
async def remove_favorite(
    station_id: int = Path(gt=0),
    session_id: SessionToken = Depends(required_session_token),
    store: PreferencesStore = Depends(get_preferences_store),
):
    with endpoint_guard(
        "Failed to remove favorite station",
        session_id=session_id, station_id=station_id,
    ):
        await store.remove_favorite(session_id, station_id)
        return AckResponse(message="Station removed from favorites")


@router.post("/visited/{station_id}", response_model=AckResponse)
async def mark_visited(
    station_id: int = Path(gt=0),
    session_id: SessionToken = Depends(session_token),
    store: PreferencesStore = Depends(get_preferences_store),
):
    with endpoint_guard(
        "Failed to mark station as visited",
        session_id=session_id, station_id=station_id,
    ):
        await store.add_visited(session_id, station_id)
        return AckResponse(message="Station marked as visited")


@router.get("/recommendations", response_model=list[AttractionWithDetails])
async def recommendations(
    limit: int = Query(PERSONALIZED_LIMIT, ge=1),
    session_id: SessionToken = Depends(session_token),
    catalog: MetroCatalog = Depends(get_catalog),
    store: PreferencesStore = Depends(get_preferences_store),
):
    """Preferred-category attractions by rating, else the recommended set."""
    with endpoint_guard(
        "Failed to fetch personalized recommendations", session_id=session_id,
    ):
        attractions = await personalized_recommendations(
            catalog, store, session_id, limit,
        )
        return to_details(attractions)
