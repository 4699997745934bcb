"""Pydantic Schemas - response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format only; no store access here
"""
