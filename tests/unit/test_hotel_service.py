"""Tests for HotelService visibility and ownership."""

from uuid import uuid4

import pytest

from src.checkinn.core.exceptions import NotFoundError
from src.checkinn.models import HotelStatus
from src.checkinn.schemas.hotel import HotelCreate, HotelUpdate
from src.checkinn.services import HotelService
from tests.factories import HotelFactory
from tests.helpers import add_partner

pytestmark = pytest.mark.unit


@pytest.fixture
def service(hotel_repo, session) -> HotelService:
    return HotelService(hotel_repo, session)


def _add_hotel(store, **kwargs):
    hotel = HotelFactory.build(**kwargs)
    store.hotels[hotel.id] = hotel
    return hotel


async def test_inactive_hotel_hidden_from_public(service, store):
    owner, _ = add_partner(store)
    hotel = _add_hotel(store, owner_id=owner.id, status=HotelStatus.INACTIVE.value)

    with pytest.raises(NotFoundError, match="Hotel not found"):
        await service.get_public(hotel.id)


async def test_public_list_filters_by_city(service, store):
    owner, _ = add_partner(store)
    _add_hotel(store, owner_id=owner.id, city="Hue")
    _add_hotel(store, owner_id=owner.id, city="Da Nang")
    _add_hotel(store, owner_id=owner.id, city="Hue", status=HotelStatus.INACTIVE.value)

    hotels, total = await service.list_public(1, 10, city="hue")

    assert total == 1
    assert hotels[0].city == "Hue"


async def test_create_sets_owner(service, store):
    owner, _ = add_partner(store)

    hotel = await service.create(
        owner, HotelCreate(name="Sunrise", address="1 Tran Phu", city="Hue", star_rating=3)
    )

    assert hotel.owner_id == owner.id
    assert store.hotels[hotel.id] is hotel


async def test_other_partners_hotel_is_not_found(service, store):
    owner, _ = add_partner(store)
    intruder, _ = add_partner(store)
    hotel = _add_hotel(store, owner_id=owner.id)

    with pytest.raises(NotFoundError):
        await service.update(intruder, hotel.id, HotelUpdate(name="Hijacked"))
    with pytest.raises(NotFoundError):
        await service.delete(intruder, hotel.id)

    assert hotel.name != "Hijacked"
    assert hotel.id in store.hotels


async def test_update_and_delete_own_hotel(service, store):
    owner, _ = add_partner(store)
    hotel = _add_hotel(store, owner_id=owner.id)

    await service.update(owner, hotel.id, HotelUpdate(status=HotelStatus.INACTIVE))
    assert hotel.status == HotelStatus.INACTIVE.value

    await service.delete(owner, hotel.id)
    assert hotel.id not in store.hotels

    with pytest.raises(NotFoundError):
        await service.delete(owner, uuid4())
