"""Repository layer - data access abstraction."""

from src.checkinn.repositories.base import BaseRepository
from src.checkinn.repositories.hotel import HotelRepository
from src.checkinn.repositories.partner import PartnerRepository
from src.checkinn.repositories.token import RefreshTokenRepository
from src.checkinn.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "HotelRepository",
    "PartnerRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
