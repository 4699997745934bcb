"""API Layer - FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except the empty 404 on delete)

Design Decisions:
    - Thin routes delegate to the NameStore in core/
"""
