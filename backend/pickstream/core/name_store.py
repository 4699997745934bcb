"""Name Store - thread-safe, insertion-ordered collection of unique names.

Invariants:
    - No duplicates (exact match after trimming), no blank entries
    - Insertion order preserved for listing
    - Every public method takes the lock exactly once: check-then-add,
      size-then-index and names-with-count are single critical sections
    - Rejections are signalled by return value, never by exceptions

Design Decisions:
    - One threading.Lock around a plain list over a lock-free structure:
      operations are O(n) at worst on a tiny list, and the lock makes every
      read a consistent snapshot
    - Random source injected: tests pin selection with a seeded random.Random
    - Empty-store pick returns NO_NAMES_AVAILABLE (soft fail)
"""

import logging
import random
import threading
from typing import Iterable

from pickstream.core.domain_types import Name, NO_NAMES_AVAILABLE
from pickstream.core.name_rules import normalize_name

logger = logging.getLogger(__name__)


class NameStore:
    """In-memory name collection shared by all request handlers."""

    def __init__(
        self,
        initial: Iterable[str] = (),
        rng: random.Random | None = None,
    ):
        self._names: list[Name] = []
        self._lock = threading.Lock()
        self._rng = rng or random.Random()
        for raw in initial:
            self.add(raw)
        logger.info(
            f"NameStore initialized with {len(self._names)} names",
            extra={"names_count": len(self._names)},
        )

    def pick_random(self) -> Name:
        """Uniformly random name, or NO_NAMES_AVAILABLE when empty."""
        with self._lock:
            if not self._names:
                logger.warning("Name list is empty, returning default")
                return NO_NAMES_AVAILABLE
            index = self._rng.randrange(len(self._names))
            selected = self._names[index]
        logger.debug(f"Selected name: {selected} at index {index}")
        return selected

    def add(self, raw: str | None) -> bool:
        """Append a trimmed name. False if blank or already present."""
        name = normalize_name(raw)
        if name is None:
            logger.warning("Attempted to add null or empty name")
            return False
        with self._lock:
            if name in self._names:
                logger.info(f"Name already exists: {name}", extra={"entry": name})
                return False
            self._names.append(name)
            total = len(self._names)
        logger.info(
            f"Added new name: {name}. Total names: {total}",
            extra={"entry": name, "names_count": total},
        )
        return True

    def list_all(self) -> list[Name]:
        """Copy of the names in insertion order."""
        with self._lock:
            return list(self._names)

    def count(self) -> int:
        with self._lock:
            return len(self._names)

    def snapshot(self) -> tuple[list[Name], int]:
        """Names and their count read under one lock acquisition."""
        with self._lock:
            return list(self._names), len(self._names)

    def remove(self, raw: str | None) -> bool:
        """Remove the exact trimmed match. Returns whether anything was removed."""
        name = normalize_name(raw)
        if name is None:
            return False
        with self._lock:
            if name not in self._names:
                return False
            self._names.remove(name)
            remaining = len(self._names)
        logger.info(
            f"Removed name: {name}. Remaining: {remaining}",
            extra={"entry": name, "names_count": remaining},
        )
        return True

    def clear(self) -> int:
        """Drop every name. Returns how many were removed."""
        with self._lock:
            removed = len(self._names)
            self._names.clear()
        logger.info(f"Cleared all {removed} names", extra={"names_count": 0})
        return removed
