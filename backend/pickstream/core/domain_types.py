"""Domain Types - rich types and constants shared across the name service.

Invariants:
    - Name is always trimmed and non-empty (produced by name_rules.normalize_name)
    - DEFAULT_NAMES has no duplicates and no blank entries
    - NO_NAMES_AVAILABLE is returned by value, never raised

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - Defaults as a tuple: immutable seed, copied into each store on construction
"""

from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Name = NewType("Name", str)


# ─── Constants ───────────────────────────────────────────────────

NO_NAMES_AVAILABLE = Name("No names available")

DEFAULT_NAMES: tuple[str, ...] = (
    "Alice",
    "Bob",
    "Charlie",
    "Diana",
    "Eve",
    "Frank",
    "Grace",
    "Henry",
    "Ivy",
    "Jack",
)
