from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from src.checkinn.models import AccountStatus, UserRole
from src.checkinn.schemas.base import CamelModel, PageMeta


class UserRead(CamelModel):
    id: UUID
    name: str
    email: str
    phone: str | None = None
    role: UserRole
    status: AccountStatus
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class AdminUserCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8, max_length=100)
    phone: str | None = Field(default=None, max_length=30)
    role: UserRole = UserRole.CUSTOMER
    status: AccountStatus = AccountStatus.ACTIVE


class AdminUserUpdate(CamelModel):
    """Fields an admin may edit. Password and token fields are never accepted here."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    role: UserRole | None = None
    status: AccountStatus | None = None


class StatusUpdateRequest(CamelModel):
    # Free-form so an unknown value is a 400 with a readable message, not a 422
    status: str


class BulkDeleteRequest(CamelModel):
    user_ids: list[UUID] = Field(min_length=1, max_length=100)


class BulkDeleteResult(CamelModel):
    deleted: list[UUID]
    skipped: list[UUID]


class UserListData(CamelModel):
    users: list[UserRead]
    pagination: PageMeta

