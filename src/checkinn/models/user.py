"""User account model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.checkinn.models.base import utc_now
from src.checkinn.models.enums import AccountStatus, UserRole


class User(SQLModel, table=True):
    """A customer, hotel partner or admin account."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255, unique=True, index=True)
    phone: str | None = Field(default=None, max_length=30)
    hashed_password: str = Field(max_length=255)
    role: str = Field(default=UserRole.CUSTOMER.value, max_length=20, index=True)
    status: str = Field(default=AccountStatus.ACTIVE.value, max_length=20, index=True)
    status_updated_at: datetime | None = Field(default=None)
    last_login_at: datetime | None = Field(default=None)
    deleted_at: datetime | None = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None and self.status == AccountStatus.ACTIVE

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_partner(self) -> bool:
        return self.role == UserRole.HOTEL_PARTNER
