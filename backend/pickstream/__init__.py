"""Pickstream Backend - random name picker HTTP service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
