"""Core — pure domain logic and types. No IO, no framework imports.

Invariants:
    - Core NEVER imports from infrastructure, services, or api
    - Every function here is deterministic given its inputs (token generation aside)
"""
