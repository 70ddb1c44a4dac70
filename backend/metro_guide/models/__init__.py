"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Lines, stations, categories, attractions are reference data (read-only here)
    - UserPreferences is the only table this service writes

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from metro_guide.models.metro_line import MetroLine  # noqa: F401
from metro_guide.models.station import Station  # noqa: F401
from metro_guide.models.category import Category  # noqa: F401
from metro_guide.models.attraction import Attraction  # noqa: F401
from metro_guide.models.user_preferences import UserPreferences  # noqa: F401
