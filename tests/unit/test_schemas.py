"""Tests for wire-format conventions of the response schemas."""

import pytest

from src.checkinn.models import PartnerStatus
from src.checkinn.schemas import ApiResponse, PageMeta, UserRead
from src.checkinn.schemas.partner import (
    ApplicationStats,
    ApplicationStatusData,
    OnboardingStatusData,
    PartnerRead,
)
from tests.factories import PartnerInfoFactory, UserFactory

pytestmark = pytest.mark.unit


def test_envelope_serializes_camel_case():
    user = UserFactory.build()

    body = ApiResponse[UserRead](message="ok", data=UserRead.model_validate(user)).model_dump(
        mode="json", by_alias=True
    )

    assert body["success"] is True
    assert body["data"]["createdAt"]
    assert "created_at" not in body["data"]


@pytest.mark.parametrize(
    ("total", "limit", "pages"), [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2)]
)
def test_page_meta_total_pages(total, limit, pages):
    assert PageMeta.build(page=1, limit=limit, total=total).total_pages == pages


def test_stats_total():
    stats = ApplicationStats.from_counts(
        {"pending": 2, "verified": 3, "rejected": 1, "suspended": 1}
    )

    assert stats.total == 7


class TestApplicationStatusData:
    def test_reason_shown_when_rejected(self):
        user = UserFactory.partner()
        partner = PartnerInfoFactory.with_status(
            PartnerStatus.REJECTED, user_id=user.id, rejection_reason="Expired license"
        )

        body = ApplicationStatusData.from_records(user, partner).model_dump(by_alias=True)

        assert body["rejectionReason"] == "Expired license"

    @pytest.mark.parametrize(
        "status", [PartnerStatus.PENDING, PartnerStatus.VERIFIED, PartnerStatus.SUSPENDED]
    )
    def test_reason_hidden_otherwise(self, status):
        user = UserFactory.partner()
        partner = PartnerInfoFactory.with_status(
            status, user_id=user.id, rejection_reason="Stale reason"
        )

        body = ApplicationStatusData.from_records(user, partner).model_dump(by_alias=True)

        assert "rejectionReason" not in body
        assert body["verificationStatus"] == status

    def test_onboarding_progress(self):
        user = UserFactory.partner()
        partner = PartnerInfoFactory.onboarded(user_id=user.id)

        progress = ApplicationStatusData.from_records(user, partner).onboarding_progress

        assert progress.business_info_completed
        assert progress.bank_account_completed
        assert progress.documents_uploaded


def test_partner_read_nests_record():
    user = UserFactory.partner()
    partner = PartnerInfoFactory.onboarded(user_id=user.id)

    body = PartnerRead.from_records(user, partner).model_dump(mode="json", by_alias=True)

    assert body["partnerInfo"]["bankAccount"]["bankName"] == "Vietcombank"
    assert body["partnerInfo"]["documents"][0]["type"] == "business_license"


def test_onboarding_steps():
    partner = PartnerInfoFactory.build(user_id=UserFactory.partner().id, onboarding_step=3)

    data = OnboardingStatusData.from_record(partner)

    assert data.steps.business_info is True
    assert data.steps.documents is False
    assert data.steps.verified is False
