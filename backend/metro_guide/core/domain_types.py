"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SessionToken is an opaque client-held string, never a database id
    - Language values are the only accepted preference languages
    - DEFAULT_LANGUAGE is what an unseen session reports

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionToken = NewType("SessionToken", str)


# ─── Enums ───────────────────────────────────────────────────────

class Language(str, Enum):
    """Content languages. Arabic is the product default."""
    AR = "ar"
    EN = "en"


DEFAULT_LANGUAGE = Language.AR


# ─── Query limits ────────────────────────────────────────────────

STATION_PAGE_SIZE = 50
POPULAR_STATIONS_LIMIT = 10
SEARCH_RESULTS_CAP = 20
RECOMMENDED_LIMIT = 10
PERSONALIZED_LIMIT = 6
