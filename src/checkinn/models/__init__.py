"""Model exports.

Import from here: `from src.checkinn.models import User, PartnerInfo`
"""

# Enums
from src.checkinn.models.enums import (
    AccountStatus,
    DocumentType,
    HotelStatus,
    PartnerStatus,
    UserRole,
)

# Tables
from src.checkinn.models.auth import RefreshToken
from src.checkinn.models.hotel import Hotel
from src.checkinn.models.partner import PartnerInfo
from src.checkinn.models.user import User

__all__ = [
    # Enums
    "AccountStatus",
    "DocumentType",
    "HotelStatus",
    "PartnerStatus",
    "UserRole",
    # Tables
    "Hotel",
    "PartnerInfo",
    "RefreshToken",
    "User",
]
