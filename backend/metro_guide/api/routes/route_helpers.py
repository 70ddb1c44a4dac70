"""Route Helpers — session-token dependencies, service factories, and the endpoint guard.

Invariants:
    - session_token never fails: a missing/blank header yields a fresh token,
      echoed back in the response header of the same name (error responses
      included, via request.state)
    - required_session_token fails with 400 "Session ID required" instead
    - endpoint_guard lets MetroGuideError through untouched and turns anything
      else into EndpointFailureError carrying the endpoint's generic message

Design Decisions:
    - Header name read from settings at request time, so tests and deployments
      can rename it without touching routes
    - Remove-favorite alone uses required_session_token; every other
      session-scoped route synthesizes (established client contract)
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from metro_guide.config import get_settings
from metro_guide.core.domain_types import SessionToken
from metro_guide.core.errors import (
    EndpointFailureError, InvalidInputError, MetroGuideError,
)
from metro_guide.core.session_token import (
    generate_session_token, normalize_session_token,
)
from metro_guide.infrastructure.database import get_db
from metro_guide.services.metro_catalog import MetroCatalog
from metro_guide.services.user_preferences import PreferencesStore

logger = logging.getLogger(__name__)


def session_token(request: Request, response: Response) -> SessionToken:
    """Session token from the request header, or a newly issued one."""
    header = get_settings().session_header
    token = normalize_session_token(request.headers.get(header))
    if token is None:
        token = generate_session_token()
        response.headers[header] = token
        request.state.issued_session_token = token
        logger.info("Issued new session token", extra={"session_id": token})
    return token


def required_session_token(request: Request) -> SessionToken:
    header = get_settings().session_header
    token = normalize_session_token(request.headers.get(header))
    if token is None:
        raise InvalidInputError("Session ID required", field=header)
    return token


def get_catalog(db: AsyncSession = Depends(get_db)) -> MetroCatalog:
    return MetroCatalog(db)


def get_preferences_store(db: AsyncSession = Depends(get_db)) -> PreferencesStore:
    return PreferencesStore(db)


@contextmanager
def endpoint_guard(failure_message: str, **log_extra) -> Iterator[None]:
    """Map unexpected failures inside the block to a generic 500."""
    try:
        yield
    except MetroGuideError:
        raise
    except Exception as e:
        logger.error(
            f"{failure_message}: {e}", exc_info=True, extra=log_extra,
        )
        raise EndpointFailureError(failure_message) from e
