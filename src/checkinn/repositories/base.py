"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        return await self.session.get(self.model, id)

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    async def count(self, query: Any) -> int:
        """Count the rows a query would return, ignoring ordering and paging."""
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
        result = await self.session.execute(count_query)
        return int(result.scalar_one())

    async def paginate(self, query: Any, page: int, limit: int) -> tuple[list[ModelType], int]:
        """Execute page-number pagination on a scalar query.

        Args:
            query: The ordered SQLModel select to paginate
            page: 1-based page number
            limit: Maximum number of items per page

        Returns:
            Tuple of (items, total) where total counts all matching rows.
        """
        total = await self.count(query)
        result = await self.session.execute(query.offset((page - 1) * limit).limit(limit))
        return list(result.scalars().all()), total
