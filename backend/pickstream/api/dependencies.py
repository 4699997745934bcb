"""Route Dependencies - hands the application-owned NameStore to route handlers.

Invariants:
    - Exactly one NameStore per app, built in the lifespan and kept on app.state
    - Routes never construct or import a store directly

Design Decisions:
    - Depends(get_name_store) over a module-level singleton: tests swap the
      store through app.dependency_overrides
"""

from fastapi import Request

from pickstream.core.name_store import NameStore


def get_name_store(request: Request) -> NameStore:
    """FastAPI dependency for the shared name store."""
    store = getattr(request.app.state, "name_store", None)
    if store is None:
        raise RuntimeError("Name store not initialized")
    return store
