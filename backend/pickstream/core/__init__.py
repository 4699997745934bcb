"""Core Layer - name store and pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Only name_store holds state; everything else is pure

Design Decisions:
    - Functional core separated from the FastAPI shell
"""
