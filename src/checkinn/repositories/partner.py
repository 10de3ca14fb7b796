"""Repository for PartnerInfo entity."""

from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select

from src.checkinn.models import PartnerInfo, PartnerStatus, User, UserRole
from src.checkinn.repositories.base import BaseRepository


class PartnerRepository(BaseRepository[PartnerInfo]):
    """Partner records are keyed by the owning user's id."""

    model = PartnerInfo

    async def get_by_user_id(self, user_id: UUID, for_update: bool = False) -> PartnerInfo | None:
        """Get a partner record.

        Args:
            user_id: The owning user's id
            for_update: Lock the row so concurrent transitions serialize
        """
        query = select(PartnerInfo).where(PartnerInfo.user_id == user_id)
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> tuple[User, PartnerInfo] | None:
        """Find a live HotelPartner account and its record by email."""
        result = await self.session.execute(
            select(User, PartnerInfo)
            .join(PartnerInfo, col(PartnerInfo.user_id) == col(User.id))
            .where(
                User.email == email.lower(),
                User.role == UserRole.HOTEL_PARTNER.value,
                col(User.deleted_at).is_(None),
            )
        )
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_applications(
        self,
        page: int,
        limit: int,
        verification_status: str | None = None,
        search: str | None = None,
    ) -> tuple[list[tuple[User, PartnerInfo]], int]:
        """List partner applications, newest first, with optional filters."""
        query = (
            select(User, PartnerInfo)
            .join(PartnerInfo, col(PartnerInfo.user_id) == col(User.id))
            .where(
                User.role == UserRole.HOTEL_PARTNER.value,
                col(User.deleted_at).is_(None),
            )
        )
        if verification_status:
            query = query.where(PartnerInfo.verification_status == verification_status)
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(
                    col(User.name).ilike(pattern),
                    col(User.email).ilike(pattern),
                    col(PartnerInfo.business_name).ilike(pattern),
                )
            )
        query = query.order_by(col(PartnerInfo.created_at).desc())

        total = await self.count(query)
        result = await self.session.execute(query.offset((page - 1) * limit).limit(limit))
        return [(row[0], row[1]) for row in result.all()], total

    async def count_by_status(self) -> dict[str, int]:
        """Count live partner applications per verification status."""
        result = await self.session.execute(
            select(PartnerInfo.verification_status, func.count())
            .join(User, col(PartnerInfo.user_id) == col(User.id))
            .where(
                User.role == UserRole.HOTEL_PARTNER.value,
                col(User.deleted_at).is_(None),
            )
            .group_by(PartnerInfo.verification_status)
        )
        counts = {status.value: 0 for status in PartnerStatus}
        for status, count in result.all():
            counts[status] = int(count)
        return counts
