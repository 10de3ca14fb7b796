"""Admin user management.

An admin can never act on their own account through these operations, and
never suspend or delete another admin. The self check runs before any
lookup so it holds even for ids that do not exist.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.checkinn.core.logging import get_logger
from src.checkinn.core.security import hash_password
from src.checkinn.models import AccountStatus, PartnerInfo, PartnerStatus, User, UserRole
from src.checkinn.models.base import utc_now
from src.checkinn.repositories import PartnerRepository, UserRepository
from src.checkinn.schemas.user import AdminUserCreate, AdminUserUpdate
from src.checkinn.services.auth_service import AuthService

logger = get_logger(__name__)

SELF_STATUS_CHANGE = "You cannot change your own account status"
SELF_UPDATE = "You cannot modify your own account through admin user management"
SELF_DELETE = "You cannot delete your own account"
OTHER_ADMIN_STATUS = "Cannot change the status of another admin"
OTHER_ADMIN_DELETE = "Cannot delete another admin account"
INVALID_STATUS = "Invalid status. Must be one of: active, suspended, inactive"


def ensure_not_self(admin: User, target_id: UUID, message: str) -> None:
    """Raise ForbiddenError if an admin targets their own account."""
    if target_id == admin.id:
        logger.warning("Admin self-action refused", admin_id=str(admin.id), reason=message)
        raise ForbiddenError(message)


def parse_account_status(value: str) -> AccountStatus:
    try:
        return AccountStatus(value)
    except ValueError as e:
        raise ValidationError(INVALID_STATUS) from e


class AdminUserService:
    def __init__(
        self,
        user_repo: UserRepository,
        partner_repo: PartnerRepository,
        session: AsyncSession,
        auth_service: AuthService,
    ):
        self.user_repo = user_repo
        self.partner_repo = partner_repo
        self.session = session
        self.auth_service = auth_service

    async def list_users(
        self,
        page: int,
        limit: int,
        search: str | None = None,
        role: UserRole | None = None,
        status: AccountStatus | None = None,
    ) -> tuple[list[User], int]:
        return await self.user_repo.list_users(
            page,
            limit,
            search=search,
            role=role.value if role else None,
            status=status.value if status else None,
        )

    async def get_user(self, user_id: UUID) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None or user.deleted_at is not None:
            raise NotFoundError("User not found")
        return user

    async def _ensure_partner_record(self, user: User) -> None:
        if user.role != UserRole.HOTEL_PARTNER:
            return
        if await self.partner_repo.get_by_user_id(user.id) is None:
            self.partner_repo.add(
                PartnerInfo(
                    user_id=user.id,
                    verification_status=PartnerStatus.PENDING.value,
                    business_name=user.name,
                )
            )

    async def create_user(self, admin: User, data: AdminUserCreate) -> User:
        """Create an account of any role. HotelPartners start with a pending application."""
        email = data.email.lower()
        if await self.user_repo.exists_by_email(email):
            raise ValidationError("Email already registered")

        user = User(
            name=data.name,
            email=email,
            phone=data.phone,
            hashed_password=hash_password(data.password),
            role=data.role.value,
            status=data.status.value,
        )
        try:
            self.user_repo.add(user)
            await self.session.flush()
            await self._ensure_partner_record(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User created by admin", user_id=str(user.id), admin_id=str(admin.id), role=user.role
        )
        return user

    async def update_user(self, admin: User, user_id: UUID, data: AdminUserUpdate) -> User:
        ensure_not_self(admin, user_id, SELF_UPDATE)
        user = await self.get_user(user_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if user.role == UserRole.ADMIN and ("status" in changes or "role" in changes):
            raise ForbiddenError(OTHER_ADMIN_STATUS)
        if "email" in changes:
            changes["email"] = changes["email"].lower()
            if changes["email"] != user.email and await self.user_repo.exists_by_email(
                changes["email"]
            ):
                raise ValidationError("Email already in use")

        now = utc_now()
        for field, value in changes.items():
            if field in ("role", "status"):
                value = value.value
            setattr(user, field, value)
        if "status" in changes:
            user.status_updated_at = now
        user.updated_at = now

        try:
            await self._ensure_partner_record(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User updated by admin",
            user_id=str(user.id),
            admin_id=str(admin.id),
            fields=sorted(changes),
        )
        if user.status != AccountStatus.ACTIVE:
            await self.auth_service.revoke_all_tokens_for_user(user.id)
        return user

    async def update_status(self, admin: User, user_id: UUID, status: str) -> User:
        """Set a user's account status. Non-active accounts are signed out everywhere."""
        ensure_not_self(admin, user_id, SELF_STATUS_CHANGE)
        new_status = parse_account_status(status)
        user = await self.get_user(user_id)
        if user.role == UserRole.ADMIN:
            raise ForbiddenError(OTHER_ADMIN_STATUS)

        from_status = user.status
        now = utc_now()
        user.status = new_status.value
        user.status_updated_at = now
        user.updated_at = now
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "User status changed",
            user_id=str(user.id),
            admin_id=str(admin.id),
            from_status=from_status,
            to_status=user.status,
        )
        if new_status != AccountStatus.ACTIVE:
            await self.auth_service.revoke_all_tokens_for_user(user.id)
        return user

    def _soft_delete(self, user: User) -> None:
        now = utc_now()
        # Free the address for re-registration while keeping the row for history
        user.email = f"deleted_{int(now.timestamp())}_{user.email}"
        user.deleted_at = now
        user.status = AccountStatus.INACTIVE.value
        user.status_updated_at = now
        user.updated_at = now

    async def delete_user(self, admin: User, user_id: UUID) -> None:
        ensure_not_self(admin, user_id, SELF_DELETE)
        user = await self.get_user(user_id)
        if user.role == UserRole.ADMIN:
            raise ForbiddenError(OTHER_ADMIN_DELETE)

        self._soft_delete(user)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User deleted", user_id=str(user_id), admin_id=str(admin.id))
        await self.auth_service.revoke_all_tokens_for_user(user_id)

    async def bulk_delete(self, admin: User, user_ids: list[UUID]) -> tuple[list[UUID], list[UUID]]:
        """Soft-delete many users. The caller and other admins are skipped, not refused.

        Returns:
            Tuple of (deleted ids, skipped ids).
        """
        deleted: list[UUID] = []
        skipped: list[UUID] = []
        for user_id in dict.fromkeys(user_ids):
            if user_id == admin.id:
                skipped.append(user_id)
                continue
            user = await self.user_repo.get_by_id(user_id)
            if user is None or user.deleted_at is not None or user.role == UserRole.ADMIN:
                skipped.append(user_id)
                continue
            self._soft_delete(user)
            deleted.append(user_id)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Users bulk deleted",
            admin_id=str(admin.id),
            deleted_count=len(deleted),
            skipped_count=len(skipped),
        )
        for user_id in deleted:
            await self.auth_service.revoke_all_tokens_for_user(user_id)
        return deleted, skipped
