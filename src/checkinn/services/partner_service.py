"""Partner registration and onboarding.

Onboarding edits (business info, bank account, documents) only advance the
onboarding cursor; they never change the verification status.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.checkinn.core.exceptions import NotFoundError, ValidationError
from src.checkinn.core.logging import get_logger
from src.checkinn.core.security import hash_password
from src.checkinn.models import HotelStatus, PartnerInfo, PartnerStatus, User, UserRole
from src.checkinn.models.base import utc_now
from src.checkinn.models.partner import (
    ONBOARDING_STEP_BANK_ACCOUNT,
    ONBOARDING_STEP_BASIC_INFO,
    ONBOARDING_STEP_BUSINESS_INFO,
    ONBOARDING_STEP_COMPLETED,
    ONBOARDING_STEP_DOCUMENTS,
)
from src.checkinn.repositories import HotelRepository, PartnerRepository, UserRepository
from src.checkinn.schemas.partner import (
    BankAccount,
    BusinessInfoUpdate,
    DocumentsUploadRequest,
    DocumentUpload,
    PartnerRegisterCompleteRequest,
    PartnerRegisterRequest,
)

logger = get_logger(__name__)

EMAIL_TAKEN = "Email already registered"


def _documents_payload(documents: list[DocumentUpload]) -> list[dict[str, str]]:
    return [{"type": doc.type.value, "url": doc.url, "status": "pending"} for doc in documents]


class PartnerService:
    def __init__(
        self,
        user_repo: UserRepository,
        partner_repo: PartnerRepository,
        hotel_repo: HotelRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.partner_repo = partner_repo
        self.hotel_repo = hotel_repo
        self.session = session

    async def _create_partner(
        self, data: PartnerRegisterRequest, **partner_fields: object
    ) -> tuple[User, PartnerInfo]:
        email = data.email.lower()
        if await self.user_repo.exists_by_email(email):
            raise ValidationError(EMAIL_TAKEN)

        user = User(
            name=data.name,
            email=email,
            phone=data.phone,
            hashed_password=hash_password(data.password),
            role=UserRole.HOTEL_PARTNER.value,
        )
        partner = PartnerInfo(
            user_id=user.id,
            verification_status=PartnerStatus.PENDING.value,
            **partner_fields,
        )
        try:
            self.user_repo.add(user)
            # Parent row must exist before the partner_info FK is checked
            await self.session.flush()
            self.partner_repo.add(partner)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationError(EMAIL_TAKEN) from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Partner registered",
            user_id=str(user.id),
            onboarding_step=partner.onboarding_step,
        )
        return user, partner

    async def register(self, data: PartnerRegisterRequest) -> tuple[User, PartnerInfo]:
        """Create a HotelPartner account with a pending application (step 1 only)."""
        return await self._create_partner(
            data,
            business_name=data.business_name or data.name,
            business_type=data.business_type or "individual",
            onboarding_step=ONBOARDING_STEP_BASIC_INFO,
        )

    async def register_complete(
        self, data: PartnerRegisterCompleteRequest
    ) -> tuple[User, PartnerInfo]:
        """Create a HotelPartner account with every onboarding step filled in."""
        return await self._create_partner(
            data,
            business_name=data.business_name,
            business_type=data.business_type,
            tax_id=data.tax_id,
            business_address=data.business_address,
            bank_account=data.bank_account.model_dump(),
            documents=_documents_payload(data.documents),
            onboarding_step=ONBOARDING_STEP_COMPLETED,
            onboarding_completed=True,
        )

    async def get_partner_info(self, user: User) -> PartnerInfo:
        partner = await self.partner_repo.get_by_user_id(user.id)
        if partner is None:
            raise NotFoundError("Partner not found")
        return partner

    async def _save(self, partner: PartnerInfo, event: str) -> PartnerInfo:
        partner.updated_at = utc_now()
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(event, user_id=str(partner.user_id), onboarding_step=partner.onboarding_step)
        return partner

    async def update_business_info(self, user: User, data: BusinessInfoUpdate) -> PartnerInfo:
        partner = await self.get_partner_info(user)
        partner.business_name = data.business_name
        partner.business_type = data.business_type
        partner.tax_id = data.tax_id
        partner.business_address = data.business_address
        partner.advance_onboarding(ONBOARDING_STEP_BUSINESS_INFO)
        return await self._save(partner, "Partner business info updated")

    async def update_bank_account(self, user: User, data: BankAccount) -> PartnerInfo:
        partner = await self.get_partner_info(user)
        partner.bank_account = data.model_dump()
        partner.advance_onboarding(ONBOARDING_STEP_BANK_ACCOUNT)
        return await self._save(partner, "Partner bank account updated")

    async def upload_documents(self, user: User, data: DocumentsUploadRequest) -> PartnerInfo:
        partner = await self.get_partner_info(user)
        # Reassign rather than append: the JSON column does not track in-place mutation
        partner.documents = [*(partner.documents or []), *_documents_payload(data.documents)]
        partner.advance_onboarding(ONBOARDING_STEP_DOCUMENTS)
        return await self._save(partner, "Partner documents uploaded")

    async def complete_onboarding(self, user: User) -> PartnerInfo:
        """Mark onboarding finished.

        Raises:
            ValidationError: If business info, bank account or documents are missing.
        """
        partner = await self.get_partner_info(user)
        if partner.onboarding_step < ONBOARDING_STEP_DOCUMENTS:
            raise ValidationError("Please complete all onboarding steps")
        partner.onboarding_completed = True
        partner.onboarding_step = ONBOARDING_STEP_COMPLETED
        return await self._save(partner, "Partner onboarding completed")

    async def get_dashboard(self, user: User) -> tuple[PartnerInfo, int, int]:
        """Return the partner record with (total, active) hotel counts."""
        partner = await self.get_partner_info(user)
        hotels = await self.hotel_repo.list_by_owner(user.id)
        active = sum(1 for hotel in hotels if hotel.status == HotelStatus.ACTIVE)
        return partner, len(hotels), active
