"""Create the bootstrap admin account.

Reads ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME from the environment (or .env):

    python -m scripts.create_admin

Idempotent: an existing account with that email is promoted to Admin and
reactivated; its password is left unchanged.
"""

import asyncio
import sys

from src.checkinn.core.config import get_settings
from src.checkinn.core.db import dispose_engine, get_session
from src.checkinn.core.logging import get_logger, setup_logging
from src.checkinn.core.security import hash_password
from src.checkinn.models import AccountStatus, User, UserRole
from src.checkinn.models.base import utc_now
from src.checkinn.repositories import UserRepository

logger = get_logger(__name__)


async def create_admin() -> int:
    settings = get_settings()
    if not settings.admin_password:
        logger.error("ADMIN_PASSWORD must be set to create the admin account")
        return 1

    async with get_session() as session:
        repo = UserRepository(session)
        user = await repo.get_by_email(settings.admin_email)

        if user is None:
            user = User(
                name=settings.admin_name,
                email=settings.admin_email.lower(),
                hashed_password=hash_password(settings.admin_password),
                role=UserRole.ADMIN.value,
            )
            repo.add(user)
            action = "created"
        else:
            user.role = UserRole.ADMIN.value
            user.status = AccountStatus.ACTIVE.value
            user.updated_at = utc_now()
            action = "promoted"

        await session.commit()

    logger.info(f"Admin account {action}", user_id=str(user.id))
    return 0


async def main() -> int:
    setup_logging()
    try:
        return await create_admin()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
