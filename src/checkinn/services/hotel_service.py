"""Hotel listings: public browsing and partner-side management."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.exceptions import NotFoundError
from src.checkinn.core.logging import get_logger
from src.checkinn.models import Hotel, HotelStatus, User
from src.checkinn.models.base import utc_now
from src.checkinn.repositories import HotelRepository
from src.checkinn.schemas.hotel import HotelCreate, HotelUpdate

logger = get_logger(__name__)


class HotelService:
    def __init__(self, hotel_repo: HotelRepository, session: AsyncSession):
        self.hotel_repo = hotel_repo
        self.session = session

    async def list_public(
        self, page: int, limit: int, city: str | None = None
    ) -> tuple[list[Hotel], int]:
        return await self.hotel_repo.list_active(page, limit, city=city)

    async def get_public(self, hotel_id: UUID) -> Hotel:
        hotel = await self.hotel_repo.get_by_id(hotel_id)
        if hotel is None or hotel.status != HotelStatus.ACTIVE:
            raise NotFoundError("Hotel not found")
        return hotel

    async def list_for_owner(self, owner: User) -> list[Hotel]:
        return await self.hotel_repo.list_by_owner(owner.id)

    async def _get_owned(self, owner: User, hotel_id: UUID) -> Hotel:
        hotel = await self.hotel_repo.get_by_id(hotel_id)
        # Someone else's hotel looks the same as a missing one
        if hotel is None or hotel.owner_id != owner.id:
            raise NotFoundError("Hotel not found")
        return hotel

    async def create(self, owner: User, data: HotelCreate) -> Hotel:
        hotel = Hotel(owner_id=owner.id, **data.model_dump())
        try:
            self.hotel_repo.add(hotel)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Hotel created", hotel_id=str(hotel.id), owner_id=str(owner.id))
        return hotel

    async def update(self, owner: User, hotel_id: UUID, data: HotelUpdate) -> Hotel:
        hotel = await self._get_owned(owner, hotel_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(hotel, field, value.value if isinstance(value, HotelStatus) else value)
        hotel.updated_at = utc_now()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return hotel

    async def delete(self, owner: User, hotel_id: UUID) -> None:
        hotel = await self._get_owned(owner, hotel_id)
        try:
            await self.hotel_repo.delete(hotel)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Hotel deleted", hotel_id=str(hotel_id), owner_id=str(owner.id))
