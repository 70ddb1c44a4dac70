"""Preferences Store — upsert-by-session persistence for visitor preferences.

Invariants:
    - At most one UserPreferences row per session_id
    - Unsupplied fields on first write take model defaults (empty lists, "ar")
    - Every write bumps updated_at and commits before returning
    - List mutations (favorites, visited) read and write under one row lock

Design Decisions:
    - SELECT ... FOR UPDATE around read-modify-write: two concurrent "add favorite"
      calls for the same session serialize instead of losing one update
      (SQLite ignores the hint; its writer lock gives the same outcome)
    - A first insert that loses the unique-key race is retried once; the retry
      finds the winner's row and updates it
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from metro_guide.core.domain_types import SessionToken
from metro_guide.core.preference_lists import with_id, without_id
from metro_guide.models.user_preferences import UserPreferences

logger = logging.getLogger(__name__)

_UPSERT_ATTEMPTS = 2


class PreferencesStore:
    """Reads and upserts the preferences record of one session at a time."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, session_id: SessionToken) -> UserPreferences | None:
        result = await self.db.execute(
            select(UserPreferences).where(
                UserPreferences.session_id == session_id,
            ),
        )
        return result.scalar_one_or_none()

    async def upsert(
        self, session_id: SessionToken, changes: dict,
    ) -> UserPreferences:
        """Apply partial field changes, creating the record if needed."""
        return await self._write(session_id, lambda _: dict(changes))

    async def add_favorite(self, session_id: SessionToken, station_id: int) -> None:
        await self._write(
            session_id,
            lambda prefs: {
                "favorite_stations": with_id(_current(prefs, "favorite_stations"), station_id),
            },
        )

    async def remove_favorite(self, session_id: SessionToken, station_id: int) -> None:
        await self._write(
            session_id,
            lambda prefs: {
                "favorite_stations": without_id(_current(prefs, "favorite_stations"), station_id),
            },
        )

    async def add_visited(self, session_id: SessionToken, station_id: int) -> None:
        await self._write(
            session_id,
            lambda prefs: {
                "visited_stations": with_id(_current(prefs, "visited_stations"), station_id),
            },
        )

    async def _write(
        self,
        session_id: SessionToken,
        compute: Callable[[UserPreferences | None], dict],
    ) -> UserPreferences:
        attempt = 0
        while True:
            attempt += 1
            prefs = await self._lock(session_id)
            changes = compute(prefs)
            if prefs is None:
                prefs = UserPreferences(session_id=session_id, **changes)
                self.db.add(prefs)
            else:
                for key, value in changes.items():
                    setattr(prefs, key, value)
                prefs.updated_at = datetime.now(timezone.utc)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                if attempt >= _UPSERT_ATTEMPTS:
                    raise
                logger.warning(
                    "Concurrent preferences insert, retrying as update",
                    extra={"session_id": session_id},
                )
                continue
            await self.db.refresh(prefs)
            return prefs

    async def _lock(self, session_id: SessionToken) -> UserPreferences | None:
        result = await self.db.execute(
            select(UserPreferences)
            .where(UserPreferences.session_id == session_id)
            .with_for_update()
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()


def _current(prefs: UserPreferences | None, field: str) -> list[int]:
    return list(getattr(prefs, field) or []) if prefs else []
