"""Tests for VerificationService: loading, commits and the public status lookup."""

from uuid import uuid4

import pytest

from src.checkinn.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.checkinn.models import PartnerStatus
from src.checkinn.services import VerificationService
from tests.helpers import add_admin, add_partner, add_user

pytestmark = pytest.mark.unit


@pytest.fixture
def service(user_repo, partner_repo, session) -> VerificationService:
    return VerificationService(user_repo, partner_repo, session)


class TestApprove:
    async def test_approve_pending(self, service, store, session):
        admin = add_admin(store)
        user, _ = add_partner(store)

        _, partner = await service.approve(user.id, admin)

        assert partner.verification_status == PartnerStatus.VERIFIED
        assert partner.verified_by == admin.id
        session.commit.assert_awaited_once()

    async def test_refusal_rolls_back(self, service, store, session):
        admin = add_admin(store)
        user, _ = add_partner(store, status=PartnerStatus.VERIFIED)

        with pytest.raises(ConflictError, match="Partner is already verified"):
            await service.approve(user.id, admin)

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited_once()

    async def test_unknown_id(self, service, store):
        admin = add_admin(store)

        with pytest.raises(NotFoundError, match="Partner not found"):
            await service.approve(uuid4(), admin)

    async def test_non_partner_is_not_found(self, service, store):
        admin = add_admin(store)
        customer = add_user(store)

        with pytest.raises(NotFoundError):
            await service.approve(customer.id, admin)

    async def test_deleted_partner_is_not_found(self, service, store):
        admin = add_admin(store)
        user, _ = add_partner(store)
        user.deleted_at = user.created_at

        with pytest.raises(NotFoundError):
            await service.approve(user.id, admin)


class TestReject:
    async def test_reject_stores_reason(self, service, store):
        admin = add_admin(store)
        user, _ = add_partner(store)

        _, partner = await service.reject(user.id, admin, "Tax ID does not match license")

        assert partner.verification_status == PartnerStatus.REJECTED
        assert partner.rejection_reason == "Tax ID does not match license"

    async def test_blank_reason_checked_before_lookup(self, service, store, session):
        admin = add_admin(store)

        with pytest.raises(ValidationError, match="Rejection reason is required"):
            await service.reject(uuid4(), admin, "  ")

        session.rollback.assert_not_awaited()

    async def test_reject_twice(self, service, store):
        admin = add_admin(store)
        user, _ = add_partner(store)
        await service.reject(user.id, admin, "First reason")

        with pytest.raises(ConflictError, match="already rejected"):
            await service.reject(user.id, admin, "Second reason")

        assert store.partners[user.id].rejection_reason == "First reason"


class TestSuspend:
    async def test_suspend_verified(self, service, store):
        admin = add_admin(store)
        user, _ = add_partner(store, status=PartnerStatus.VERIFIED)

        _, partner = await service.suspend(user.id, admin, "Fraud report")

        assert partner.verification_status == PartnerStatus.SUSPENDED
        assert partner.suspension_reason == "Fraud report"

    async def test_suspend_pending_refused(self, service, store, session):
        admin = add_admin(store)
        user, _ = add_partner(store)

        with pytest.raises(ConflictError):
            await service.suspend(user.id, admin)

        session.rollback.assert_awaited_once()


class TestListApplications:
    async def test_filter_and_stats(self, service, store):
        add_partner(store, status=PartnerStatus.PENDING)
        add_partner(store, status=PartnerStatus.PENDING)
        add_partner(store, status=PartnerStatus.VERIFIED)
        add_partner(store, status=PartnerStatus.REJECTED, rejection_reason="No license")

        rows, total, counts = await service.list_applications(
            1, 10, verification_status=PartnerStatus.PENDING
        )

        assert total == 2
        assert all(p.verification_status == PartnerStatus.PENDING for _, p in rows)
        assert counts == {"pending": 2, "verified": 1, "rejected": 1, "suspended": 0}

    async def test_search_matches_business_name(self, service, store):
        add_partner(store, business_name="Mountain Lodge")
        add_partner(store, business_name="Seaside Stays")

        rows, total, _ = await service.list_applications(1, 10, search="mountain")

        assert total == 1
        assert rows[0][1].business_name == "Mountain Lodge"

    async def test_pagination(self, service, store):
        for _ in range(5):
            add_partner(store)

        rows, total, _ = await service.list_applications(2, 2)

        assert total == 5
        assert len(rows) == 2


class TestApplicationStatus:
    async def test_found_case_insensitive(self, service, store):
        user, partner = add_partner(store, user_kwargs={"email": "owner@seaside.vn"})

        found_user, found_partner = await service.get_application_status(" Owner@Seaside.VN ")

        assert found_user is user
        assert found_partner is partner

    async def test_invalid_email(self, service):
        with pytest.raises(ValidationError, match="Invalid email format"):
            await service.get_application_status("not-an-email")

    async def test_unknown_email(self, service):
        with pytest.raises(NotFoundError, match="No application found with this email"):
            await service.get_application_status("nobody@example.com")

    async def test_customer_email_looks_unknown(self, service, store):
        add_user(store, email="guest@example.com")

        with pytest.raises(NotFoundError, match="No application found with this email"):
            await service.get_application_status("guest@example.com")
