"""Admin user management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.checkinn.api.dependencies import AdminUser, AdminUserServiceDep
from src.checkinn.models import AccountStatus, UserRole
from src.checkinn.schemas import (
    AdminUserCreate,
    AdminUserUpdate,
    ApiResponse,
    BulkDeleteRequest,
    BulkDeleteResult,
    PageMeta,
    StatusUpdateRequest,
    UserListData,
    UserRead,
)
from src.checkinn.services.admin_user_service import SELF_STATUS_CHANGE, ensure_not_self

router = APIRouter(prefix="/admin/users", tags=["admin"])

PageQuery = Annotated[int, Query(ge=1, description="Page number, starting at 1")]
LimitQuery = Annotated[int, Query(ge=1, le=100, description="Items per page")]

_SELF_RESPONSES = {
    403: {"description": "Acting on your own account or on another admin"},
    404: {"description": "User not found"},
}


async def status_target(user_id: UUID, admin: AdminUser) -> UUID:
    """Refuse a self-targeted status change before the body is validated."""
    ensure_not_self(admin, user_id, SELF_STATUS_CHANGE)
    return user_id


@router.get("")
async def list_users(
    admin: AdminUser,
    service: AdminUserServiceDep,
    page: PageQuery = 1,
    limit: LimitQuery = 10,
    search: Annotated[str | None, Query(max_length=100)] = None,
    role: UserRole | None = None,
    account_status: Annotated[AccountStatus | None, Query(alias="status")] = None,
) -> ApiResponse[UserListData]:
    users, total = await service.list_users(
        page, limit, search=search, role=role, status=account_status
    )
    return ApiResponse[UserListData](
        data=UserListData(
            users=[UserRead.model_validate(user) for user in users],
            pagination=PageMeta.build(page, limit, total),
        )
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    data: AdminUserCreate, admin: AdminUser, service: AdminUserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.create_user(admin, data)
    return ApiResponse[UserRead](message="User created", data=UserRead.model_validate(user))


# Declared before /{user_id} so "bulk" is not parsed as an id
@router.delete("/bulk")
async def bulk_delete_users(
    data: BulkDeleteRequest, admin: AdminUser, service: AdminUserServiceDep
) -> ApiResponse[BulkDeleteResult]:
    """Soft-delete many users. Your own account and other admins are skipped."""
    deleted, skipped = await service.bulk_delete(admin, data.user_ids)
    return ApiResponse[BulkDeleteResult](
        message=f"{len(deleted)} user(s) deleted",
        data=BulkDeleteResult(deleted=deleted, skipped=skipped),
    )


@router.get("/{user_id}", responses={404: {"description": "User not found"}})
async def get_user(
    user_id: UUID, admin: AdminUser, service: AdminUserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.get_user(user_id)
    return ApiResponse[UserRead](data=UserRead.model_validate(user))


@router.put("/{user_id}", responses=_SELF_RESPONSES)
async def update_user(
    user_id: UUID, data: AdminUserUpdate, admin: AdminUser, service: AdminUserServiceDep
) -> ApiResponse[UserRead]:
    user = await service.update_user(admin, user_id, data)
    return ApiResponse[UserRead](message="User updated", data=UserRead.model_validate(user))


@router.delete("/{user_id}", responses=_SELF_RESPONSES)
async def delete_user(
    user_id: UUID, admin: AdminUser, service: AdminUserServiceDep
) -> ApiResponse[None]:
    await service.delete_user(admin, user_id)
    return ApiResponse[None](message="User deleted")


@router.patch("/{user_id}/status", responses=_SELF_RESPONSES)
async def update_user_status(
    user_id: Annotated[UUID, Depends(status_target)],
    data: StatusUpdateRequest,
    admin: AdminUser,
    service: AdminUserServiceDep,
) -> ApiResponse[UserRead]:
    """Set a user's account status. Suspended and inactive accounts are signed out."""
    user = await service.update_status(admin, user_id, data.status)
    return ApiResponse[UserRead](
        message=f"User status updated to {user.status}", data=UserRead.model_validate(user)
    )
