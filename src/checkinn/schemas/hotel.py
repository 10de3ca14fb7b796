from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.checkinn.models import HotelStatus
from src.checkinn.schemas.base import CamelModel, PageMeta


class HotelCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    address: str = Field(min_length=1, max_length=500)
    city: str = Field(min_length=1, max_length=100)
    star_rating: int | None = Field(default=None, ge=1, le=5)


class HotelUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    address: str | None = Field(default=None, min_length=1, max_length=500)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    star_rating: int | None = Field(default=None, ge=1, le=5)
    status: HotelStatus | None = None


class HotelRead(CamelModel):
    id: UUID
    owner_id: UUID
    name: str
    description: str | None = None
    address: str
    city: str
    star_rating: int | None = None
    status: HotelStatus
    created_at: datetime
    updated_at: datetime


class HotelListData(CamelModel):
    hotels: list[HotelRead]
    pagination: PageMeta | None = None
