"""Hotel listing owned by a verified partner."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.checkinn.models.base import utc_now
from src.checkinn.models.enums import HotelStatus


class Hotel(SQLModel, table=True):
    __tablename__ = "hotels"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    owner_id: UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    name: str = Field(max_length=200, index=True)
    description: str | None = Field(default=None, max_length=5000)
    address: str = Field(max_length=500)
    city: str = Field(max_length=100, index=True)
    star_rating: int | None = Field(default=None, ge=1, le=5)
    status: str = Field(default=HotelStatus.ACTIVE.value, max_length=20, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
