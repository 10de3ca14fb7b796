"""Partner application record, owned 1:1 by a HotelPartner user."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.checkinn.models.base import utc_now
from src.checkinn.models.enums import PartnerStatus

ONBOARDING_STEP_BASIC_INFO = 1
ONBOARDING_STEP_BUSINESS_INFO = 2
ONBOARDING_STEP_BANK_ACCOUNT = 3
ONBOARDING_STEP_DOCUMENTS = 4
ONBOARDING_STEP_COMPLETED = 5


class PartnerInfo(SQLModel, table=True):
    """Business profile and verification state of a hotel partner.

    ``rejection_reason`` is only meaningful while the status is ``rejected``;
    approval clears it.
    """

    __tablename__ = "partner_info"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    verification_status: str = Field(
        default=PartnerStatus.PENDING.value, max_length=20, index=True
    )
    rejection_reason: str | None = Field(default=None, max_length=1000)
    suspension_reason: str | None = Field(default=None, max_length=1000)

    business_name: str | None = Field(default=None, max_length=200, index=True)
    business_type: str | None = Field(default=None, max_length=50)
    tax_id: str | None = Field(default=None, max_length=50)
    business_address: str | None = Field(default=None, max_length=500)
    bank_account: dict[str, Any] | None = Field(default=None, sa_column=Column(JSON))
    documents: list[dict[str, Any]] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )

    onboarding_step: int = Field(default=ONBOARDING_STEP_BASIC_INFO)
    onboarding_completed: bool = Field(default=False)

    verified_at: datetime | None = Field(default=None)
    verified_by: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def business_info_completed(self) -> bool:
        return bool(self.business_name and self.business_address)

    @property
    def bank_account_completed(self) -> bool:
        return bool(
            self.bank_account
            and self.bank_account.get("bank_name")
            and self.bank_account.get("account_number")
        )

    @property
    def documents_uploaded(self) -> bool:
        return len(self.documents or []) > 0

    def advance_onboarding(self, step: int) -> None:
        """Move the onboarding cursor forward; it never moves back."""
        self.onboarding_step = max(self.onboarding_step, step)
