"""FastAPI dependency injection definitions."""

from src.checkinn.api.dependencies.auth import (
    AdminUser,
    CurrentUser,
    PartnerUser,
    VerifiedPartner,
    get_current_user,
    require_roles,
    require_verified_partner,
)
from src.checkinn.api.dependencies.db import DBSession, get_db_session
from src.checkinn.api.dependencies.repositories import (
    HotelRepo,
    PartnerRepo,
    TokenRepo,
    UserRepo,
    get_hotel_repository,
    get_partner_repository,
    get_token_repository,
    get_user_repository,
)
from src.checkinn.api.dependencies.services import (
    AdminUserServiceDep,
    AuthServiceDep,
    HotelServiceDep,
    PartnerServiceDep,
    UserServiceDep,
    VerificationServiceDep,
    get_admin_user_service,
    get_auth_service,
    get_hotel_service,
    get_partner_service,
    get_user_service,
    get_verification_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AdminUser",
    "CurrentUser",
    "PartnerUser",
    "VerifiedPartner",
    "get_current_user",
    "require_roles",
    "require_verified_partner",
    # Repositories
    "HotelRepo",
    "PartnerRepo",
    "TokenRepo",
    "UserRepo",
    "get_hotel_repository",
    "get_partner_repository",
    "get_token_repository",
    "get_user_repository",
    # Services
    "AdminUserServiceDep",
    "AuthServiceDep",
    "HotelServiceDep",
    "PartnerServiceDep",
    "UserServiceDep",
    "VerificationServiceDep",
    "get_admin_user_service",
    "get_auth_service",
    "get_hotel_service",
    "get_partner_service",
    "get_user_service",
    "get_verification_service",
]
