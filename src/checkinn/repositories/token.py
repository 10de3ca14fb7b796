"""Repository for RefreshToken entity."""

from uuid import UUID

from sqlalchemy import update
from sqlmodel import select

from src.checkinn.models import RefreshToken
from src.checkinn.models.base import utc_now
from src.checkinn.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    model = RefreshToken

    async def get_by_hash(self, token_hash: str) -> RefreshToken | None:
        """Get refresh token by its hash."""
        result = await self.session.execute(
            select(RefreshToken).where(RefreshToken.token_hash == token_hash)
        )
        return result.scalar_one_or_none()

    async def get_valid_by_hash(
        self, token_hash: str, for_update: bool = False
    ) -> RefreshToken | None:
        """Get a non-revoked, non-expired refresh token by hash.

        Args:
            token_hash: The hashed token to look up
            for_update: Lock the row so two parallel refreshes cannot both rotate it
        """
        query = select(RefreshToken).where(
            RefreshToken.token_hash == token_hash,
            RefreshToken.revoked == False,  # noqa: E712
            RefreshToken.expires_at > utc_now(),
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_active_hashes_for_user(self, user_id: UUID) -> list[str]:
        """Get hashes of a user's live tokens, for bulk blacklisting."""
        result = await self.session.execute(
            select(RefreshToken.token_hash).where(
                RefreshToken.user_id == user_id,
                RefreshToken.revoked == False,  # noqa: E712
                RefreshToken.expires_at > utc_now(),
            )
        )
        return list(result.scalars().all())

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Revoke all active refresh tokens of a user. Returns the number revoked."""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.user_id == user_id)  # type: ignore[arg-type]
            .where(RefreshToken.revoked == False)  # type: ignore[arg-type]  # noqa: E712
            .values(revoked=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
