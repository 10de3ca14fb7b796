"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.checkinn.api.dependencies.db import DBSession
from src.checkinn.api.dependencies.repositories import (
    HotelRepo,
    PartnerRepo,
    TokenRepo,
    UserRepo,
)
from src.checkinn.services import (
    AdminUserService,
    AuthService,
    HotelService,
    PartnerService,
    UserService,
    VerificationService,
)


def get_auth_service(
    user_repo: UserRepo,
    token_repo: TokenRepo,
    session: DBSession,
) -> AuthService:
    return AuthService(user_repo, token_repo, session)


def get_verification_service(
    user_repo: UserRepo,
    partner_repo: PartnerRepo,
    session: DBSession,
) -> VerificationService:
    return VerificationService(user_repo, partner_repo, session)


def get_partner_service(
    user_repo: UserRepo,
    partner_repo: PartnerRepo,
    hotel_repo: HotelRepo,
    session: DBSession,
) -> PartnerService:
    return PartnerService(user_repo, partner_repo, hotel_repo, session)


def get_hotel_service(hotel_repo: HotelRepo, session: DBSession) -> HotelService:
    return HotelService(hotel_repo, session)


def get_admin_user_service(
    user_repo: UserRepo,
    partner_repo: PartnerRepo,
    session: DBSession,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AdminUserService:
    """Admin user management revokes tokens through the auth service."""
    return AdminUserService(user_repo, partner_repo, session, auth_service)


def get_user_service(
    session: DBSession, auth_service: Annotated[AuthService, Depends(get_auth_service)]
) -> UserService:
    return UserService(session, auth_service)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
VerificationServiceDep = Annotated[VerificationService, Depends(get_verification_service)]
PartnerServiceDep = Annotated[PartnerService, Depends(get_partner_service)]
HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
AdminUserServiceDep = Annotated[AdminUserService, Depends(get_admin_user_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
