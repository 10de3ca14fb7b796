from src.checkinn.services.admin_user_service import AdminUserService
from src.checkinn.services.auth_service import AuthService
from src.checkinn.services.hotel_service import HotelService
from src.checkinn.services.partner_service import PartnerService
from src.checkinn.services.user_service import UserService
from src.checkinn.services.verification_service import VerificationService

__all__ = [
    "AdminUserService",
    "AuthService",
    "HotelService",
    "PartnerService",
    "UserService",
    "VerificationService",
]
