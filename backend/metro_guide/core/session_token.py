"""Session Tokens — pseudonymous correlation keys for anonymous visitors.

Invariants:
    - Tokens are 32 lowercase hex chars (128 random bits)
    - A supplied token is used verbatim after whitespace stripping; blank counts as absent

Design Decisions:
    - uuid4 randomness: collision odds are negligible at any realistic visitor count
    - Not an auth credential: unsigned and non-expiring by contract
"""

import uuid

from metro_guide.core.domain_types import SessionToken


def generate_session_token() -> SessionToken:
    return SessionToken(uuid.uuid4().hex)


def normalize_session_token(raw: str | None) -> SessionToken | None:
    """Return the stripped token, or None when the header is missing or blank."""
    if raw is None:
        return None
    token = raw.strip()
    return SessionToken(token) if token else None
