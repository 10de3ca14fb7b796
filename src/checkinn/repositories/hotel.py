"""Repository for Hotel entity."""

from uuid import UUID

from sqlmodel import col, select

from src.checkinn.models import Hotel, HotelStatus
from src.checkinn.repositories.base import BaseRepository


class HotelRepository(BaseRepository[Hotel]):
    model = Hotel

    async def list_active(
        self, page: int, limit: int, city: str | None = None
    ) -> tuple[list[Hotel], int]:
        """List publicly visible hotels."""
        query = select(Hotel).where(Hotel.status == HotelStatus.ACTIVE.value)
        if city:
            query = query.where(col(Hotel.city).ilike(city))
        query = query.order_by(col(Hotel.created_at).desc())
        return await self.paginate(query, page, limit)

    async def list_by_owner(self, owner_id: UUID) -> list[Hotel]:
        """List every hotel of a partner, including inactive ones."""
        result = await self.session.execute(
            select(Hotel).where(Hotel.owner_id == owner_id).order_by(col(Hotel.created_at).desc())
        )
        return list(result.scalars().all())
