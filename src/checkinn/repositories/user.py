"""Repository for User entity."""

from sqlalchemy import or_
from sqlmodel import col, select

from src.checkinn.models import User
from src.checkinn.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address (case-insensitive)."""
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with the given email exists."""
        user = await self.get_by_email(email)
        return user is not None

    async def list_users(
        self,
        page: int,
        limit: int,
        search: str | None = None,
        role: str | None = None,
        status: str | None = None,
    ) -> tuple[list[User], int]:
        """List non-deleted users, newest first, with optional filters."""
        query = select(User).where(col(User.deleted_at).is_(None))
        if search:
            pattern = f"%{search}%"
            query = query.where(
                or_(col(User.name).ilike(pattern), col(User.email).ilike(pattern))
            )
        if role:
            query = query.where(User.role == role)
        if status:
            query = query.where(User.status == status)
        query = query.order_by(col(User.created_at).desc())
        return await self.paginate(query, page, limit)
