"""Hotel factory for test data generation."""

from polyfactory import Use

from src.checkinn.models import Hotel, HotelStatus
from tests.factories.base import BaseFactory, generate_uuid, utc_now


class HotelFactory(BaseFactory):
    """Factory for Hotel. ``owner_id`` must be set explicitly."""

    __model__ = Hotel

    id = Use(generate_uuid)
    owner_id = None
    name = Use(lambda: f"Hotel {generate_uuid().hex[-6:]}")
    description = "Sea view rooms"
    address = "1 Tran Phu"
    city = "Da Nang"
    star_rating = 4
    status = HotelStatus.ACTIVE.value
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def inactive(cls, **kwargs):
        return cls.build(status=HotelStatus.INACTIVE.value, **kwargs)
