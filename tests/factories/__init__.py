"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, PartnerInfoFactory, ...
"""

from tests.factories.auth import RefreshTokenFactory
from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.hotel import HotelFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, PartnerInfoFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # User
    "DEFAULT_TEST_PASSWORD",
    "PartnerInfoFactory",
    "UserFactory",
    # Hotel
    "HotelFactory",
    # Auth
    "RefreshTokenFactory",
]
