"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are bare JSON; error bodies are {"message": ...}

Design Decisions:
    - Thin routes delegate to services; routes only translate HTTP <-> calls
"""
