"""Partner verification - the access gate and the admin-driven status transitions.

    pending --approve--> verified --suspend--> suspended
       |
       +-----reject----> rejected

Only admins move a partner out of ``pending``. ``rejected`` and ``suspended``
have no outgoing transitions. The gate and the transition rules are plain
functions over the records so they can be checked without a database;
VerificationService wraps them with loading, locking and commits.
"""

from uuid import UUID

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.checkinn.core.logging import get_logger
from src.checkinn.models import AccountStatus, PartnerInfo, PartnerStatus, User, UserRole
from src.checkinn.models.base import utc_now
from src.checkinn.repositories import PartnerRepository, UserRepository

logger = get_logger(__name__)

PENDING_REVIEW_MESSAGE = (
    "Your partner application is pending review. Please wait for admin approval."
)
REJECTED_MESSAGE = "Your partner application was rejected. Reason: {reason}"
DEFAULT_REJECTION_REASON = "Application rejected"
SUSPENDED_MESSAGE = "Your partner account has been suspended. Please contact support."
STATUS_UNKNOWN_MESSAGE = "Partner verification status not found. Please contact support."

ALREADY_VERIFIED = "Partner is already verified"
APPROVE_REJECTED = (
    "Partner application was rejected. "
    "The partner must resubmit a new application before approval"
)
APPROVE_SUSPENDED = "Partner account is suspended. Please unsuspend the account before approval"
ALREADY_REJECTED = "Partner application is already rejected"
REJECT_VERIFIED = "Cannot reject a partner that is already verified"
REJECT_SUSPENDED = "Cannot reject a suspended partner"
REASON_REQUIRED = "Rejection reason is required"

_email_adapter = TypeAdapter(EmailStr)


def check_partner_verified(user: User, partner: PartnerInfo | None) -> None:
    """Allow the request only if the user is not a partner or is a verified one.

    Raises:
        ForbiddenError: With a message describing why the partner is blocked.
    """
    if user.role != UserRole.HOTEL_PARTNER:
        return

    status = partner.verification_status if partner is not None else None
    match status:
        case PartnerStatus.VERIFIED:
            return
        case PartnerStatus.PENDING:
            raise ForbiddenError(PENDING_REVIEW_MESSAGE)
        case PartnerStatus.REJECTED:
            reason = (partner.rejection_reason if partner else None) or DEFAULT_REJECTION_REASON
            raise ForbiddenError(REJECTED_MESSAGE.format(reason=reason))
        case PartnerStatus.SUSPENDED:
            raise ForbiddenError(SUSPENDED_MESSAGE)
        case _:
            raise ForbiddenError(STATUS_UNKNOWN_MESSAGE)


def approve_partner(user: User, partner: PartnerInfo, admin_id: UUID) -> None:
    """Move a pending application to verified.

    Raises:
        ConflictError: If the application is not pending, or the account is suspended.
    """
    status = partner.verification_status
    match status:
        case PartnerStatus.PENDING:
            if user.status == AccountStatus.SUSPENDED:
                raise ConflictError(APPROVE_SUSPENDED, current_status=status)
        case PartnerStatus.VERIFIED:
            raise ConflictError(ALREADY_VERIFIED, current_status=status)
        case PartnerStatus.REJECTED:
            raise ConflictError(APPROVE_REJECTED, current_status=status)
        case PartnerStatus.SUSPENDED:
            raise ConflictError(APPROVE_SUSPENDED, current_status=status)
        case _:
            raise ConflictError(f"Cannot approve partner with status '{status}'", status)

    now = utc_now()
    partner.verification_status = PartnerStatus.VERIFIED.value
    partner.rejection_reason = None
    partner.verified_at = now
    partner.verified_by = admin_id
    partner.updated_at = now
    user.status = AccountStatus.ACTIVE.value
    user.updated_at = now


def reject_partner(partner: PartnerInfo, reason: str | None) -> None:
    """Move a pending application to rejected, storing the reason verbatim.

    Raises:
        ValidationError: If the reason is missing or blank.
        ConflictError: If the application is not pending.
    """
    if reason is None or not reason.strip():
        raise ValidationError(REASON_REQUIRED)

    status = partner.verification_status
    match status:
        case PartnerStatus.PENDING:
            pass
        case PartnerStatus.REJECTED:
            raise ConflictError(ALREADY_REJECTED, current_status=status)
        case PartnerStatus.VERIFIED:
            raise ConflictError(REJECT_VERIFIED, current_status=status)
        case PartnerStatus.SUSPENDED:
            raise ConflictError(REJECT_SUSPENDED, current_status=status)
        case _:
            raise ConflictError(f"Cannot reject partner with status '{status}'", status)

    partner.verification_status = PartnerStatus.REJECTED.value
    partner.rejection_reason = reason
    partner.updated_at = utc_now()


def suspend_partner(partner: PartnerInfo, reason: str | None = None) -> None:
    """Move a verified partner to suspended.

    Raises:
        ConflictError: If the partner is not verified.
    """
    status = partner.verification_status
    if status != PartnerStatus.VERIFIED:
        raise ConflictError(
            f"Only verified partners can be suspended (current status: {status})",
            current_status=status,
        )

    partner.verification_status = PartnerStatus.SUSPENDED.value
    partner.suspension_reason = reason
    partner.updated_at = utc_now()


class VerificationService:
    """Admin review of partner applications, plus the public status lookup."""

    def __init__(
        self,
        user_repo: UserRepository,
        partner_repo: PartnerRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.partner_repo = partner_repo
        self.session = session

    async def _load(self, partner_id: UUID, for_update: bool = False) -> tuple[User, PartnerInfo]:
        user = await self.user_repo.get_by_id(partner_id)
        if user is None or user.deleted_at is not None or user.role != UserRole.HOTEL_PARTNER:
            raise NotFoundError("Partner not found")
        partner = await self.partner_repo.get_by_user_id(partner_id, for_update=for_update)
        if partner is None:
            raise NotFoundError("Partner not found")
        return user, partner

    async def approve(self, partner_id: UUID, admin: User) -> tuple[User, PartnerInfo]:
        """Approve a pending application and activate the account."""
        try:
            user, partner = await self._load(partner_id, for_update=True)
            from_status = partner.verification_status
            try:
                approve_partner(user, partner, admin.id)
            except ConflictError as e:
                logger.warning(
                    "Partner approval refused",
                    partner_id=str(partner_id),
                    admin_id=str(admin.id),
                    current_status=e.current_status,
                )
                raise
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Partner approved",
            partner_id=str(partner_id),
            admin_id=str(admin.id),
            from_status=from_status,
            to_status=partner.verification_status,
        )
        return user, partner

    async def reject(
        self, partner_id: UUID, admin: User, reason: str | None
    ) -> tuple[User, PartnerInfo]:
        """Reject a pending application with a mandatory reason."""
        if reason is None or not reason.strip():
            raise ValidationError(REASON_REQUIRED)

        try:
            user, partner = await self._load(partner_id, for_update=True)
            from_status = partner.verification_status
            try:
                reject_partner(partner, reason)
            except ConflictError as e:
                logger.warning(
                    "Partner rejection refused",
                    partner_id=str(partner_id),
                    admin_id=str(admin.id),
                    current_status=e.current_status,
                )
                raise
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Partner rejected",
            partner_id=str(partner_id),
            admin_id=str(admin.id),
            from_status=from_status,
            to_status=partner.verification_status,
        )
        return user, partner

    async def suspend(
        self, partner_id: UUID, admin: User, reason: str | None = None
    ) -> tuple[User, PartnerInfo]:
        """Suspend a verified partner, closing the gate to partner features."""
        try:
            user, partner = await self._load(partner_id, for_update=True)
            from_status = partner.verification_status
            suspend_partner(partner, reason)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Partner suspended",
            partner_id=str(partner_id),
            admin_id=str(admin.id),
            from_status=from_status,
            to_status=partner.verification_status,
        )
        return user, partner

    async def list_applications(
        self,
        page: int,
        limit: int,
        verification_status: PartnerStatus | None = None,
        search: str | None = None,
    ) -> tuple[list[tuple[User, PartnerInfo]], int, dict[str, int]]:
        """List applications with filters. Stats always cover every application."""
        rows, total = await self.partner_repo.list_applications(
            page,
            limit,
            verification_status=verification_status.value if verification_status else None,
            search=search,
        )
        counts = await self.partner_repo.count_by_status()
        return rows, total, counts

    async def get_application_status(self, email: str) -> tuple[User, PartnerInfo]:
        """Public lookup of an application by email.

        "Not registered" and "not a partner" are deliberately indistinguishable.
        """
        try:
            normalized = _email_adapter.validate_python(email.strip())
        except PydanticValidationError as e:
            raise ValidationError("Invalid email format") from e

        found = await self.partner_repo.get_by_email(normalized)
        if found is None:
            raise NotFoundError("No application found with this email")
        return found
