"""Name Routes - random pick and CRUD over the shared NameStore.

Invariants:
    - Routes hold no state; every call goes through the injected NameStore
    - Store rejections (False) become 400/404 here, the store itself never raises
    - DELETE of an absent name is a 404 with an empty body

Design Decisions:
    - add/remove failures raised as PickstreamError subclasses so the global
      handler renders every 400 the same way
    - No per-route try/except: unexpected faults go to the catch-all handler
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from pickstream.api.dependencies import get_name_store
from pickstream.core.errors import DuplicateNameError, InvalidNameError
from pickstream.core.name_rules import normalize_name
from pickstream.core.name_store import NameStore
from pickstream.schemas.names import ApiResponse, NameResponse, NamesData

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["names"])


@router.get("/random-name", response_model=NameResponse)
async def fetch_random_name(store: NameStore = Depends(get_name_store)):
    """Pick one name uniformly at random."""
    logger.info(
        "GET /api/random-name - Fetching random name",
        extra={"method": "GET", "path": "/api/random-name"},
    )
    return NameResponse(name=store.pick_random())


@router.post(
    "/random-name", response_model=ApiResponse,
    response_model_exclude_none=True,
)
async def add_name(
    name: str = Query(...),
    store: NameStore = Depends(get_name_store),
):
    """Add a name given as the `name` query parameter."""
    logger.info(
        f"POST /api/random-name - Adding name: {name}",
        extra={"method": "POST", "path": "/api/random-name"},
    )
    normalized = normalize_name(name)
    if normalized is None:
        raise InvalidNameError()
    if not store.add(normalized):
        raise DuplicateNameError(normalized)
    return ApiResponse.ok("Name added successfully")


@router.get("/names", response_model=ApiResponse)
async def list_names(store: NameStore = Depends(get_name_store)):
    """All names in insertion order, with their count."""
    logger.info(
        "GET /api/names - Fetching all names",
        extra={"method": "GET", "path": "/api/names"},
    )
    names, count = store.snapshot()
    data = NamesData(names=names, count=count)
    return ApiResponse.ok("Names retrieved successfully", data.model_dump())


@router.delete("/names", response_model=ApiResponse)
async def clear_names(store: NameStore = Depends(get_name_store)):
    """Remove every name from the store."""
    logger.info(
        "DELETE /api/names - Clearing all names",
        extra={"method": "DELETE", "path": "/api/names"},
    )
    removed = store.clear()
    return ApiResponse.ok(f"Cleared {removed} names", {"removed": removed})


@router.delete(
    "/names/{name:path}", response_model=ApiResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Name not found"}},
)
async def delete_name(name: str, store: NameStore = Depends(get_name_store)):
    """Remove one name. 404 with an empty body when it is not present."""
    logger.info(
        f"DELETE /api/names/{name} - Removing name",
        extra={"method": "DELETE", "path": f"/api/names/{name}"},
    )
    if normalize_name(name) is None:
        raise InvalidNameError()
    if not store.remove(name):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return ApiResponse.ok("Name removed successfully")
