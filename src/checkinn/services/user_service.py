"""Self-service account management for the signed-in user."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.exceptions import AuthenticationError, ValidationError
from src.checkinn.core.logging import get_logger
from src.checkinn.core.security import hash_password, verify_password
from src.checkinn.models import AccountStatus, User
from src.checkinn.models.base import utc_now
from src.checkinn.schemas.auth import PasswordUpdateRequest, ProfileUpdate, TokenPair
from src.checkinn.services.auth_service import AuthService

logger = get_logger(__name__)

PASSWORD_NOT_ALLOWED = "This route is not for password updates. Please use /update-password."
WRONG_CURRENT_PASSWORD = "Your current password is incorrect."


class UserService:
    """User self-service: profile edits, password change and deactivation."""

    def __init__(self, session: AsyncSession, auth_service: AuthService):
        self.session = session
        self.auth_service = auth_service

    async def update(self, user: User, data: ProfileUpdate) -> User:
        """Update the profile fields a user may change themselves.

        Raises:
            ValidationError: If password fields were sent.
        """
        if data.password is not None or data.password_confirm is not None:
            raise ValidationError(PASSWORD_NOT_ALLOWED)

        update_data = data.model_dump(
            include={"name", "phone"}, exclude_unset=True, exclude_none=True
        )
        for field, value in update_data.items():
            setattr(user, field, value)

        user.updated_at = utc_now()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Profile updated", user_id=str(user.id), fields=sorted(update_data))
        return user

    async def change_password(self, user: User, data: PasswordUpdateRequest) -> TokenPair:
        """Replace the password, sign out every session and issue a fresh pair.

        Raises:
            AuthenticationError: If the current password is wrong.
        """
        if not verify_password(data.password_current, user.hashed_password):
            logger.warning("Password change refused", user_id=str(user.id))
            raise AuthenticationError(WRONG_CURRENT_PASSWORD)

        user.hashed_password = hash_password(data.password)
        user.updated_at = utc_now()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.auth_service.revoke_all_tokens_for_user(user.id)
        logger.info("Password changed", user_id=str(user.id))
        return await self.auth_service.issue_tokens(user)

    async def deactivate(self, user: User) -> User:
        """Deactivate the account and sign it out everywhere."""
        now = utc_now()
        user.status = AccountStatus.INACTIVE.value
        user.status_updated_at = now
        user.updated_at = now
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.auth_service.revoke_all_tokens_for_user(user.id)
        logger.info("Account deactivated", user_id=str(user.id))
        return user
