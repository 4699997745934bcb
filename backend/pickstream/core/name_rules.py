"""Name Rules - pure normalization of raw user input into a Name.

Invariants:
    - Trimming is the only sanitization applied (case is preserved)
    - None, empty and whitespace-only input all normalize to None

Design Decisions:
    - Returns None instead of raising: callers decide whether a blank name is
      a soft rejection (store) or a 400 (routes)
"""

from pickstream.core.domain_types import Name


def normalize_name(raw: str | None) -> Name | None:
    """Trim raw input. Returns None when nothing is left."""
    if raw is None:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None
    return Name(trimmed)
