from src.checkinn.schemas.auth import (
    AuthData,
    LoginRequest,
    PasswordUpdateRequest,
    ProfileUpdate,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
)
from src.checkinn.schemas.base import ApiResponse, CamelModel, PageMeta
from src.checkinn.schemas.hotel import HotelCreate, HotelListData, HotelRead, HotelUpdate
from src.checkinn.schemas.partner import (
    ApplicationListData,
    ApplicationStats,
    ApplicationStatusData,
    BankAccount,
    BusinessInfoUpdate,
    DashboardData,
    DocumentsUploadRequest,
    OnboardingStatusData,
    PartnerAuthData,
    PartnerData,
    PartnerInfoRead,
    PartnerRead,
    PartnerRegisterCompleteRequest,
    PartnerRegisterRequest,
    RejectRequest,
    SuspendRequest,
)
from src.checkinn.schemas.user import (
    AdminUserCreate,
    AdminUserUpdate,
    BulkDeleteRequest,
    BulkDeleteResult,
    StatusUpdateRequest,
    UserListData,
    UserRead,
)

__all__ = [
    # Envelope
    "ApiResponse",
    "CamelModel",
    "PageMeta",
    # Auth
    "AuthData",
    "LoginRequest",
    "PasswordUpdateRequest",
    "ProfileUpdate",
    "RefreshRequest",
    "RegisterRequest",
    "TokenPair",
    # Hotel
    "HotelCreate",
    "HotelListData",
    "HotelRead",
    "HotelUpdate",
    # Partner
    "ApplicationListData",
    "ApplicationStats",
    "ApplicationStatusData",
    "BankAccount",
    "BusinessInfoUpdate",
    "DashboardData",
    "DocumentsUploadRequest",
    "OnboardingStatusData",
    "PartnerAuthData",
    "PartnerData",
    "PartnerInfoRead",
    "PartnerRead",
    "PartnerRegisterCompleteRequest",
    "PartnerRegisterRequest",
    "RejectRequest",
    "SuspendRequest",
    # User
    "AdminUserCreate",
    "AdminUserUpdate",
    "BulkDeleteRequest",
    "BulkDeleteResult",
    "StatusUpdateRequest",
    "UserListData",
    "UserRead",
]
