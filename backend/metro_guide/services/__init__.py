"""Data Access Layer — one class per aggregate, each wrapping an AsyncSession.

Invariants:
    - Services never build HTTP responses; they return ORM objects or schema models
    - Services never commit on read paths
"""
