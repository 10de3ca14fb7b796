"""Authentication service - registration, login, token refresh and revocation."""

import hmac
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.cache import blacklist_token, blacklist_tokens, is_token_blacklisted
from src.checkinn.core.config import get_settings
from src.checkinn.core.exceptions import AuthenticationError, ForbiddenError, ValidationError
from src.checkinn.core.logging import get_logger
from src.checkinn.core.security import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    hash_token,
    verify_password,
)
from src.checkinn.models import AccountStatus, RefreshToken, User, UserRole
from src.checkinn.models.base import utc_now
from src.checkinn.repositories import RefreshTokenRepository, UserRepository
from src.checkinn.schemas.auth import RegisterRequest, TokenPair

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Incorrect email or password."
INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
EMAIL_TAKEN = "Email already registered"


def _blacklist_ttl() -> int:
    return get_settings().refresh_token_expire_days * 86400


class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: RefreshTokenRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.token_repo = token_repo
        self.session = session

    async def register_customer(self, data: RegisterRequest) -> User:
        """Create a Customer account.

        Raises:
            ValidationError: If the email is already registered.
        """
        email = data.email.lower()
        if await self.user_repo.exists_by_email(email):
            raise ValidationError(EMAIL_TAKEN)

        user = User(
            name=data.name,
            email=email,
            phone=data.phone,
            hashed_password=hash_password(data.password),
            role=UserRole.CUSTOMER.value,
        )
        try:
            self.user_repo.add(user)
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            await self.session.rollback()
            raise ValidationError(EMAIL_TAKEN) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Customer registered", user_id=str(user.id))
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and account standing.

        Raises:
            AuthenticationError: Unknown email or wrong password.
            ForbiddenError: The account is suspended or inactive.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify a hash so response time does not reveal whether the email exists
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or user.deleted_at is not None or not password_valid:
            raise AuthenticationError(INVALID_CREDENTIALS)

        if user.status == AccountStatus.SUSPENDED:
            logger.warning("Login refused for suspended account", user_id=str(user.id))
            raise ForbiddenError("Your account has been suspended. Please contact support.")
        if user.status == AccountStatus.INACTIVE:
            logger.warning("Login refused for inactive account", user_id=str(user.id))
            raise ForbiddenError("Your account is inactive. Please contact support.")

        return user

    async def issue_tokens(self, user: User, record_login: bool = False) -> TokenPair:
        """Mint an access/refresh pair and persist the refresh token hash."""
        access_token = create_access_token(user.id, user.role)
        refresh_token, expires_at = create_refresh_token(user.id)

        try:
            self.token_repo.add(
                RefreshToken(
                    user_id=user.id,
                    token_hash=hash_token(refresh_token),
                    expires_at=expires_at,
                )
            )
            if record_login:
                user.last_login_at = utc_now()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    async def login(self, email: str, password: str) -> tuple[User, TokenPair]:
        user = await self.authenticate(email, password)
        tokens = await self.issue_tokens(user, record_login=True)
        logger.info("User logged in", user_id=str(user.id), role=user.role)
        return user, tokens

    async def refresh_access_token(self, refresh_token: str) -> TokenPair:
        """Rotate a refresh token: revoke the presented one and issue a new pair.

        The row is locked FOR UPDATE so two parallel refreshes with the same
        token cannot both succeed. Redis is only a fast-reject cache; the
        database decides.

        Raises:
            AuthenticationError: If the token is invalid, expired, revoked or
                belongs to an account that can no longer sign in.
        """
        payload = decode_token(refresh_token)
        if payload is None or payload.get("type") != TokenType.REFRESH:
            raise AuthenticationError(INVALID_REFRESH_TOKEN)

        try:
            user_id = UUID(str(payload.get("sub")))
        except ValueError as e:
            raise AuthenticationError(INVALID_REFRESH_TOKEN) from e

        token_hash = hash_token(refresh_token)
        if await is_token_blacklisted(token_hash) is True:
            raise AuthenticationError(INVALID_REFRESH_TOKEN)

        try:
            db_token = await self.token_repo.get_valid_by_hash(token_hash, for_update=True)
            if db_token is None or not hmac.compare_digest(token_hash, db_token.token_hash):
                raise AuthenticationError(INVALID_REFRESH_TOKEN)

            user = await self.user_repo.get_by_id(user_id)
            if user is None or not user.is_active:
                raise AuthenticationError(INVALID_REFRESH_TOKEN)

            db_token.revoked = True
            new_refresh_token, new_expires_at = create_refresh_token(user.id)
            self.token_repo.add(
                RefreshToken(
                    user_id=user.id,
                    token_hash=hash_token(new_refresh_token),
                    expires_at=new_expires_at,
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        try:
            await blacklist_token(token_hash, _blacklist_ttl())
        except Exception as e:
            # DB is already committed and authoritative
            logger.warning("Failed to blacklist token in Redis", error=str(e))

        return TokenPair(
            access_token=create_access_token(user.id, user.role),
            refresh_token=new_refresh_token,
        )

    async def revoke_refresh_token(self, refresh_token: str) -> bool:
        """Revoke a refresh token (logout). Returns True if a token was revoked."""
        token_hash = hash_token(refresh_token)
        try:
            db_token = await self.token_repo.get_by_hash(token_hash)
            if db_token is None or not hmac.compare_digest(token_hash, db_token.token_hash):
                return False
            db_token.revoked = True
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        try:
            await blacklist_token(token_hash, _blacklist_ttl())
        except Exception as e:
            logger.warning("Failed to blacklist token in Redis", error=str(e))
        return True

    async def revoke_all_tokens_for_user(self, user_id: UUID) -> int:
        """Sign a user out everywhere, e.g. after suspension or deletion.

        Returns the number of tokens revoked.
        """
        try:
            token_hashes = await self.token_repo.get_active_hashes_for_user(user_id)
            count = await self.token_repo.revoke_all_for_user(user_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if token_hashes:
            try:
                await blacklist_tokens(token_hashes, _blacklist_ttl())
            except Exception as e:
                logger.warning(
                    "Failed to blacklist tokens in Redis",
                    error=str(e),
                    token_count=len(token_hashes),
                )
        return count
