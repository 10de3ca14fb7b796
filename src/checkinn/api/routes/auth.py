"""Authentication endpoints."""

from fastapi import APIRouter, BackgroundTasks, status
from starlette.requests import Request

from src.checkinn.api.dependencies import AuthServiceDep, CurrentUser, UserServiceDep
from src.checkinn.core.notifications import send_welcome_email
from src.checkinn.core.rate_limit import limiter
from src.checkinn.schemas import (
    ApiResponse,
    AuthData,
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdate,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Email already registered"}},
)
@limiter.limit("5/minute")
async def register(
    request: Request,
    data: RegisterRequest,
    service: AuthServiceDep,
    background_tasks: BackgroundTasks,
) -> ApiResponse[AuthData]:
    """Register a Customer account and sign it in."""
    user = await service.register_customer(data)
    tokens = await service.issue_tokens(user)
    background_tasks.add_task(send_welcome_email, user.email, user.name)
    return ApiResponse[AuthData](
        message="Registration successful",
        data=AuthData(user=UserRead.model_validate(user), tokens=tokens),
    )


@router.post(
    "/login",
    responses={
        401: {"description": "Incorrect email or password"},
        403: {"description": "Account suspended or inactive"},
    },
)
@limiter.limit("5/minute")
async def login(
    request: Request, data: LoginRequest, service: AuthServiceDep
) -> ApiResponse[AuthData]:
    user, tokens = await service.login(data.email, data.password)
    return ApiResponse[AuthData](
        message="Login successful",
        data=AuthData(user=UserRead.model_validate(user), tokens=tokens),
    )


@router.post("/refresh", responses={401: {"description": "Invalid or expired refresh token"}})
@limiter.limit("10/minute")
async def refresh(
    request: Request, data: RefreshRequest, service: AuthServiceDep
) -> ApiResponse[TokenPair]:
    """Rotate the refresh token: the presented one is revoked, a new pair is returned."""
    tokens = await service.refresh_access_token(data.refresh_token)
    return ApiResponse[TokenPair](message="Token refreshed", data=tokens)


@router.post("/logout")
async def logout(data: RefreshRequest, service: AuthServiceDep) -> ApiResponse[None]:
    # Idempotent: an unknown or already revoked token is not an error
    await service.revoke_refresh_token(data.refresh_token)
    return ApiResponse[None](message="Logged out successfully")


@router.get("/me")
async def me(current_user: CurrentUser) -> ApiResponse[UserRead]:
    return ApiResponse[UserRead](data=UserRead.model_validate(current_user))


@router.patch("/update-me", responses={400: {"description": "Password fields sent"}})
async def update_me(
    data: ProfileUpdate, current_user: CurrentUser, service: UserServiceDep
) -> ApiResponse[UserRead]:
    """Update your own name or phone. Passwords go through /update-password."""
    user = await service.update(current_user, data)
    return ApiResponse[UserRead](
        message="Profile updated successfully", data=UserRead.model_validate(user)
    )


@router.patch("/update-password", responses={401: {"description": "Wrong current password"}})
@limiter.limit("5/minute")
async def update_password(
    request: Request,
    data: PasswordUpdateRequest,
    current_user: CurrentUser,
    service: UserServiceDep,
) -> ApiResponse[AuthData]:
    """Change your password. Every other session is signed out."""
    tokens = await service.change_password(current_user, data)
    return ApiResponse[AuthData](
        message="Password updated successfully",
        data=AuthData(user=UserRead.model_validate(current_user), tokens=tokens),
    )


@router.delete("/delete-me")
async def delete_me(current_user: CurrentUser, service: UserServiceDep) -> ApiResponse[None]:
    await service.deactivate(current_user)
    return ApiResponse[None](message="Account deactivated successfully")
