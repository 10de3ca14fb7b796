"""Authentication and authorization dependencies.

    CurrentUser      any signed-in, active account
    AdminUser        role Admin
    PartnerUser      role HotelPartner, any verification status (onboarding)
    VerifiedPartner  role HotelPartner that passes the verification gate
"""

from collections.abc import Callable, Coroutine
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.checkinn.api.dependencies.repositories import PartnerRepo, UserRepo
from src.checkinn.core.logging import bind_user_context
from src.checkinn.core.security import TokenType, decode_token
from src.checkinn.models import User, UserRole
from src.checkinn.services.verification_service import check_partner_verified


async def _validate_access_token(authorization: str | None, user_repo: UserRepo) -> User:
    """Validate the bearer token and return the active user it names."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    payload = decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if payload.get("type") != TokenType.ACCESS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    try:
        user_id = UUID(str(payload.get("sub")))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        ) from e

    user = await user_repo.get_by_id(user_id)
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )
    return user


async def get_current_user(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    user = await _validate_access_token(authorization, user_repo)
    bind_user_context(user.id, user.role, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_roles(*roles: UserRole) -> Callable[[User], Coroutine[Any, Any, User]]:
    """Build a dependency that admits only the given roles."""

    async def dependency(current_user: CurrentUser) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have permission to perform this action",
            )
        return current_user

    return dependency


AdminUser = Annotated[User, Depends(require_roles(UserRole.ADMIN))]
PartnerUser = Annotated[User, Depends(require_roles(UserRole.HOTEL_PARTNER))]


async def require_verified_partner(user: PartnerUser, partner_repo: PartnerRepo) -> User:
    """Close partner features to anyone whose application is not verified."""
    partner = await partner_repo.get_by_user_id(user.id)
    check_partner_verified(user, partner)
    return user


VerifiedPartner = Annotated[User, Depends(require_verified_partner)]
