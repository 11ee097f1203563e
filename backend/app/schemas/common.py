"""
Shelter Admin Backend — Shared Schemas
========================================

What:  Base classes and wrappers every resource schema builds on.
How:   API field names are camelCase, Python attributes snake_case; the alias
       generator maps between them and FastAPI serializes by alias.

Envelopes:
    success  {"data": <payload>, "code": 200, "message": "success"}
    error    {"data": null, "code": <status>, "message": "<reason>"}
    page     {"data": [...], "total": n, "page": p, "limit": l, "totalPages": ceil(n / l)}
"""

import math
from typing import Generic, List, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# upper bound for amounts stored in Numeric(10, 2) columns
MAX_MONEY = 100_000_000


class CamelModel(BaseModel):
    """Base for response schemas: camelCase on the wire, readable from ORM rows."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base for request bodies. Unknown fields are rejected with a 400."""

    model_config = ConfigDict(extra="forbid")


# ══════════════════════════════════════════════════════════════════════════
# Envelopes
# ══════════════════════════════════════════════════════════════════════════


class ApiResponse(BaseModel, Generic[T]):
    """Uniform wrapper around every successful response body."""

    data: Optional[T] = Field(default=None, description="Response payload")
    code: int = Field(default=200, description="HTTP status code, repeated in the body")
    message: str = Field(default="success")


class ErrorResponse(BaseModel):
    """
    Body of every error response.

    Example:
        {"data": null, "code": 404, "message": "Pet with ID '7' was not found"}
    """

    data: None = None
    code: int = Field(description="HTTP status code")
    message: str = Field(description="Human-readable error description")


class Page(CamelModel, Generic[T]):
    """One page of a filtered, offset-paginated listing."""

    data: List[T]
    total: int = Field(description="Rows matching the filters, across all pages")
    page: int
    limit: int
    total_pages: int = Field(description="ceil(total / limit)")

    @classmethod
    def build(cls, items: Sequence[T], total: int, page: int, limit: int) -> "Page[T]":
        return cls(
            data=list(items),
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit) if limit else 0,
        )


class MessageResponse(CamelModel):
    """Short confirmation returned by deletes and fire-and-forget actions."""

    message: str
    id: Optional[Union[int, str]] = None
    count: Optional[int] = Field(default=None, description="Rows affected, for bulk actions")


# ══════════════════════════════════════════════════════════════════════════
# Query parameters
# ══════════════════════════════════════════════════════════════════════════


class ListQuery(CamelModel):
    """Pagination shared by every list endpoint; resources add their filters."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class HealthResponse(CamelModel):
    """Returned by GET /health."""

    status: str = Field(description="healthy or unhealthy")
    version: str
    database: str = Field(description="connected or disconnected")
    uptime_seconds: float
