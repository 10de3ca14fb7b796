"""Partner registration, onboarding and verification schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import EmailStr, Field, field_validator, model_serializer
from pydantic_core.core_schema import SerializerFunctionWrapHandler

from src.checkinn.models import AccountStatus, DocumentType, PartnerInfo, PartnerStatus, User
from src.checkinn.schemas.auth import TokenPair, validate_password_strength
from src.checkinn.schemas.base import CamelModel, PageMeta
from src.checkinn.schemas.user import UserRead


class BankAccount(CamelModel):
    bank_name: str = Field(min_length=1, max_length=100)
    account_number: str = Field(min_length=4, max_length=34)
    account_holder: str = Field(min_length=1, max_length=100)
    swift_code: str | None = Field(default=None, max_length=11)
    branch_name: str | None = Field(default=None, max_length=100)


class DocumentUpload(CamelModel):
    type: DocumentType
    url: str = Field(min_length=1, max_length=2048)


class DocumentRead(DocumentUpload):
    status: str = "pending"


class PartnerRegisterRequest(CamelModel):
    """Step 1 only: the account. Business details follow during onboarding."""

    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=5, max_length=30)
    password: str = Field(min_length=8, max_length=100)
    business_name: str | None = Field(default=None, max_length=200)
    business_type: str | None = Field(default=None, max_length=50)

    @field_validator("password")
    @classmethod
    def check_password_strength(cls, v: str) -> str:
        return validate_password_strength(v)


class BusinessInfoUpdate(CamelModel):
    business_name: str = Field(min_length=1, max_length=200)
    business_type: str = Field(default="individual", max_length=50)
    tax_id: str | None = Field(default=None, max_length=50)
    business_address: str = Field(min_length=1, max_length=500)


class DocumentsUploadRequest(CamelModel):
    documents: list[DocumentUpload] = Field(min_length=1, max_length=20)


class PartnerRegisterCompleteRequest(PartnerRegisterRequest):
    """All onboarding steps submitted at once."""

    business_name: str = Field(min_length=1, max_length=200)
    business_type: str = Field(default="individual", max_length=50)
    tax_id: str | None = Field(default=None, max_length=50)
    business_address: str = Field(min_length=1, max_length=500)
    bank_account: BankAccount
    documents: list[DocumentUpload] = Field(min_length=1, max_length=20)


class RejectRequest(CamelModel):
    # Optional at the schema level; a missing or blank reason is a 400 from the service
    rejection_reason: str | None = Field(default=None, max_length=1000)


class SuspendRequest(CamelModel):
    reason: str | None = Field(default=None, max_length=1000)


class PartnerInfoRead(CamelModel):
    verification_status: PartnerStatus
    rejection_reason: str | None = None
    suspension_reason: str | None = None
    business_name: str | None = None
    business_type: str | None = None
    tax_id: str | None = None
    business_address: str | None = None
    bank_account: BankAccount | None = None
    documents: list[DocumentRead] = []
    onboarding_step: int
    onboarding_completed: bool
    verified_at: datetime | None = None
    verified_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


class PartnerRead(CamelModel):
    """A HotelPartner account together with its application record."""

    id: UUID
    name: str
    email: str
    phone: str | None = None
    status: AccountStatus
    created_at: datetime
    partner_info: PartnerInfoRead

    @classmethod
    def from_records(cls, user: User, partner: PartnerInfo) -> "PartnerRead":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            status=AccountStatus(user.status),
            created_at=user.created_at,
            partner_info=PartnerInfoRead.model_validate(partner),
        )


class PartnerAuthData(CamelModel):
    user: UserRead
    partner_info: PartnerInfoRead
    tokens: TokenPair
    next_step: int | None = None


class PartnerData(CamelModel):
    """Wraps a partner in ``data.partner``."""

    partner: PartnerRead


class ApplicationStats(CamelModel):
    pending: int = 0
    verified: int = 0
    rejected: int = 0
    suspended: int = 0
    total: int = 0

    @classmethod
    def from_counts(cls, counts: dict[str, int]) -> "ApplicationStats":
        return cls(**counts, total=sum(counts.values()))


class ApplicationListData(CamelModel):
    partners: list[PartnerRead]
    stats: ApplicationStats
    pagination: PageMeta


class OnboardingProgress(CamelModel):
    business_info_completed: bool
    bank_account_completed: bool
    documents_uploaded: bool


class ApplicationStatusData(CamelModel):
    """Public view of an application, looked up by email."""

    name: str
    email: str
    phone: str | None = None
    business_name: str | None = None
    business_type: str | None = None
    verification_status: PartnerStatus
    rejection_reason: str | None = None
    onboarding_progress: OnboardingProgress
    created_at: datetime
    updated_at: datetime

    @model_serializer(mode="wrap")
    def _drop_reason_unless_rejected(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if self.verification_status != PartnerStatus.REJECTED:
            data.pop("rejectionReason", None)
            data.pop("rejection_reason", None)
        return data

    @classmethod
    def from_records(cls, user: User, partner: PartnerInfo) -> "ApplicationStatusData":
        status = PartnerStatus(partner.verification_status)
        return cls(
            name=user.name,
            email=user.email,
            phone=user.phone,
            business_name=partner.business_name,
            business_type=partner.business_type,
            verification_status=status,
            rejection_reason=(
                partner.rejection_reason if status == PartnerStatus.REJECTED else None
            ),
            onboarding_progress=OnboardingProgress(
                business_info_completed=partner.business_info_completed,
                bank_account_completed=partner.bank_account_completed,
                documents_uploaded=partner.documents_uploaded,
            ),
            created_at=partner.created_at,
            updated_at=partner.updated_at,
        )


class OnboardingSteps(CamelModel):
    basic_info: bool
    business_info: bool
    bank_account: bool
    documents: bool
    verified: bool


class OnboardingStatusData(CamelModel):
    current_step: int
    completed: bool
    verification_status: PartnerStatus
    steps: OnboardingSteps

    @classmethod
    def from_record(cls, partner: PartnerInfo) -> "OnboardingStatusData":
        step = partner.onboarding_step
        return cls(
            current_step=step,
            completed=partner.onboarding_completed,
            verification_status=PartnerStatus(partner.verification_status),
            steps=OnboardingSteps(
                basic_info=step >= 1,
                business_info=step >= 2,
                bank_account=step >= 3,
                documents=step >= 4,
                verified=partner.verification_status == PartnerStatus.VERIFIED,
            ),
        )


class HotelCounts(CamelModel):
    total: int
    active: int


class DashboardData(CamelModel):
    partner: PartnerRead
    hotels: HotelCounts
    onboarding: OnboardingStatusData
