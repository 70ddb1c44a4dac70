"""Personalized Recommendations — preferred-category attractions with a global fallback.

Invariants:
    - No preferences record, or an empty preferred_categories list, yields exactly
      the recommended-attractions result for the same limit
    - Otherwise only attractions in the preferred categories are returned,
      rating desc, id asc, at most `limit`
"""

import logging

from metro_guide.core.domain_types import PERSONALIZED_LIMIT, SessionToken
from metro_guide.models.attraction import Attraction
from metro_guide.services.metro_catalog import MetroCatalog
from metro_guide.services.user_preferences import PreferencesStore

logger = logging.getLogger(__name__)


async def personalized_recommendations(
    catalog: MetroCatalog,
    preferences: PreferencesStore,
    session_id: SessionToken,
    limit: int = PERSONALIZED_LIMIT,
) -> list[Attraction]:
    prefs = await preferences.get(session_id)
    category_ids = [int(c) for c in (prefs.preferred_categories or [])] if prefs else []

    if not category_ids:
        logger.debug(
            "No preferred categories, using global recommendations",
            extra={"session_id": session_id, "limit": limit},
        )
        return await catalog.recommended_attractions(limit)

    return await catalog.top_rated_in_categories(category_ids, limit)
