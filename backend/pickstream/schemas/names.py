"""Name Schemas - response contracts for the /api name endpoints.

Invariants:
    - Timestamps are epoch milliseconds (int), stamped at construction
    - ApiResponse.data is omitted from JSON when None (routes set
      response_model_exclude_none)
    - HealthResponse serializes names_count as "namesCount"

Design Decisions:
    - Pydantic models over raw dicts: FastAPI documents them in OpenAPI
    - success()/error() classmethods keep envelope construction in one place
"""

import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def epoch_millis() -> int:
    return int(time.time() * 1000)


class NameResponse(BaseModel):
    """Single randomly picked name."""
    name: str
    timestamp: int = Field(default_factory=epoch_millis)


class ApiResponse(BaseModel):
    """Success/message/data envelope used by mutating and listing routes."""
    success: bool
    message: str
    data: dict[str, Any] | None = None

    @classmethod
    def ok(cls, message: str, data: dict[str, Any] | None = None) -> "ApiResponse":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)


class NamesData(BaseModel):
    """Payload of GET /api/names."""
    names: list[str]
    count: int


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    model_config = ConfigDict(populate_by_name=True)

    status: str = "UP"
    service: str
    names_count: int = Field(alias="namesCount")
    timestamp: int = Field(default_factory=epoch_millis)
