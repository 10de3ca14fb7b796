"""Wire conventions shared by every schema: camelCase keys and the response envelope."""

from math import ceil
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serializes to camelCase, accepts either camelCase or snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope: ``{"success": true, "message": ..., "data": ...}``."""

    success: bool = True
    message: str | None = None
    data: T | None = None


class PageMeta(CamelModel):
    """Page-number pagination metadata."""

    page: int
    limit: int
    total: int
    total_pages: int = Field(description="Number of pages at the current limit")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PageMeta":
        total_pages = ceil(total / limit) if limit else 0
        return cls(page=page, limit=limit, total=total, total_pages=total_pages)
