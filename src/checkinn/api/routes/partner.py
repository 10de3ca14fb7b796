"""Partner endpoints: registration, onboarding, admin review and partner hotels.

Onboarding endpoints admit any HotelPartner so an unverified applicant can
finish their application. Dashboard and hotel management sit behind the
verification gate (VerifiedPartner).
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Body, Query, status
from starlette.requests import Request

from src.checkinn.api.dependencies import (
    AdminUser,
    AuthServiceDep,
    HotelServiceDep,
    PartnerServiceDep,
    PartnerUser,
    VerificationServiceDep,
    VerifiedPartner,
)
from src.checkinn.core.notifications import (
    send_partner_application_received_email,
    send_partner_approved_email,
    send_partner_rejected_email,
)
from src.checkinn.core.rate_limit import limiter
from src.checkinn.models import PartnerInfo, PartnerStatus, User
from src.checkinn.models.partner import ONBOARDING_STEP_BUSINESS_INFO
from src.checkinn.schemas import (
    ApiResponse,
    ApplicationListData,
    ApplicationStats,
    ApplicationStatusData,
    BankAccount,
    BusinessInfoUpdate,
    DashboardData,
    DocumentsUploadRequest,
    HotelCreate,
    HotelListData,
    HotelRead,
    HotelUpdate,
    OnboardingStatusData,
    PageMeta,
    PartnerAuthData,
    PartnerData,
    PartnerInfoRead,
    PartnerRead,
    PartnerRegisterCompleteRequest,
    PartnerRegisterRequest,
    RejectRequest,
    SuspendRequest,
    UserRead,
)
from src.checkinn.schemas.partner import HotelCounts

router = APIRouter(prefix="/partner", tags=["partner"])

PageQuery = Annotated[int, Query(ge=1, description="Page number, starting at 1")]
LimitQuery = Annotated[int, Query(ge=1, le=100, description="Items per page")]


def _partner_data(user: User, partner: PartnerInfo) -> PartnerData:
    return PartnerData(partner=PartnerRead.from_records(user, partner))


# --- Registration ---


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Email already registered"}},
)
@limiter.limit("5/minute")
async def register_partner(
    request: Request,
    data: PartnerRegisterRequest,
    service: PartnerServiceDep,
    auth_service: AuthServiceDep,
    background_tasks: BackgroundTasks,
) -> ApiResponse[PartnerAuthData]:
    """Create a HotelPartner account. The application starts pending review."""
    user, partner = await service.register(data)
    tokens = await auth_service.issue_tokens(user)
    background_tasks.add_task(
        send_partner_application_received_email, user.email, user.name, partner.business_name
    )
    return ApiResponse[PartnerAuthData](
        message="Partner registration successful. Please complete your onboarding.",
        data=PartnerAuthData(
            user=UserRead.model_validate(user),
            partner_info=PartnerInfoRead.model_validate(partner),
            tokens=tokens,
            next_step=ONBOARDING_STEP_BUSINESS_INFO,
        ),
    )


@router.post(
    "/register-complete",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Email already registered"}},
)
@limiter.limit("5/minute")
async def register_partner_complete(
    request: Request,
    data: PartnerRegisterCompleteRequest,
    service: PartnerServiceDep,
    auth_service: AuthServiceDep,
    background_tasks: BackgroundTasks,
) -> ApiResponse[PartnerAuthData]:
    """Create a HotelPartner account with business, bank and document details in one call."""
    user, partner = await service.register_complete(data)
    tokens = await auth_service.issue_tokens(user)
    background_tasks.add_task(
        send_partner_application_received_email, user.email, user.name, partner.business_name
    )
    return ApiResponse[PartnerAuthData](
        message="Partner application submitted. It is now pending admin review.",
        data=PartnerAuthData(
            user=UserRead.model_validate(user),
            partner_info=PartnerInfoRead.model_validate(partner),
            tokens=tokens,
        ),
    )


@router.get(
    "/application-status/{email}",
    responses={
        400: {"description": "Invalid email format"},
        404: {"description": "No application found with this email"},
    },
)
@limiter.limit("20/minute")
async def get_application_status(
    request: Request, email: str, service: VerificationServiceDep
) -> ApiResponse[ApplicationStatusData]:
    """Public lookup so applicants can follow their review without signing in."""
    user, partner = await service.get_application_status(email)
    return ApiResponse[ApplicationStatusData](
        data=ApplicationStatusData.from_records(user, partner)
    )


# --- Admin review ---


@router.get("/applications")
async def list_applications(
    admin: AdminUser,
    service: VerificationServiceDep,
    verification_status: Annotated[
        PartnerStatus | None, Query(alias="verificationStatus")
    ] = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
    page: PageQuery = 1,
    limit: LimitQuery = 10,
) -> ApiResponse[ApplicationListData]:
    """List partner applications. Stats always cover every application, ignoring filters."""
    rows, total, counts = await service.list_applications(
        page, limit, verification_status=verification_status, search=search
    )
    return ApiResponse[ApplicationListData](
        data=ApplicationListData(
            partners=[PartnerRead.from_records(user, partner) for user, partner in rows],
            stats=ApplicationStats.from_counts(counts),
            pagination=PageMeta.build(page, limit, total),
        )
    )


@router.patch(
    "/applications/{partner_id}/approve",
    responses={
        400: {"description": "Application is not pending"},
        404: {"description": "Partner not found"},
    },
)
async def approve_application(
    partner_id: UUID,
    admin: AdminUser,
    service: VerificationServiceDep,
    background_tasks: BackgroundTasks,
) -> ApiResponse[PartnerData]:
    user, partner = await service.approve(partner_id, admin)
    background_tasks.add_task(
        send_partner_approved_email, user.email, user.name, partner.business_name
    )
    return ApiResponse[PartnerData](
        message="Partner approved successfully", data=_partner_data(user, partner)
    )


@router.patch(
    "/applications/{partner_id}/reject",
    responses={
        400: {"description": "Missing reason, or application is not pending"},
        404: {"description": "Partner not found"},
    },
)
async def reject_application(
    partner_id: UUID,
    admin: AdminUser,
    service: VerificationServiceDep,
    background_tasks: BackgroundTasks,
    body: Annotated[RejectRequest | None, Body()] = None,
) -> ApiResponse[PartnerData]:
    reason = body.rejection_reason if body else None
    user, partner = await service.reject(partner_id, admin, reason)
    background_tasks.add_task(
        send_partner_rejected_email, user.email, user.name, partner.rejection_reason
    )
    return ApiResponse[PartnerData](
        message="Partner application rejected", data=_partner_data(user, partner)
    )


@router.patch(
    "/applications/{partner_id}/suspend",
    responses={
        400: {"description": "Partner is not verified"},
        404: {"description": "Partner not found"},
    },
)
async def suspend_partner(
    partner_id: UUID,
    admin: AdminUser,
    service: VerificationServiceDep,
    body: Annotated[SuspendRequest | None, Body()] = None,
) -> ApiResponse[PartnerData]:
    user, partner = await service.suspend(partner_id, admin, body.reason if body else None)
    return ApiResponse[PartnerData](
        message="Partner suspended", data=_partner_data(user, partner)
    )


# --- Onboarding (any HotelPartner) ---


@router.get("/onboarding-status")
async def get_onboarding_status(
    user: PartnerUser, service: PartnerServiceDep
) -> ApiResponse[OnboardingStatusData]:
    partner = await service.get_partner_info(user)
    return ApiResponse[OnboardingStatusData](data=OnboardingStatusData.from_record(partner))


@router.put("/business-info")
async def update_business_info(
    data: BusinessInfoUpdate, user: PartnerUser, service: PartnerServiceDep
) -> ApiResponse[PartnerInfoRead]:
    partner = await service.update_business_info(user, data)
    return ApiResponse[PartnerInfoRead](
        message="Business information updated", data=PartnerInfoRead.model_validate(partner)
    )


@router.put("/bank-account")
async def update_bank_account(
    data: BankAccount, user: PartnerUser, service: PartnerServiceDep
) -> ApiResponse[PartnerInfoRead]:
    partner = await service.update_bank_account(user, data)
    return ApiResponse[PartnerInfoRead](
        message="Bank account updated", data=PartnerInfoRead.model_validate(partner)
    )


@router.post("/documents")
async def upload_documents(
    data: DocumentsUploadRequest, user: PartnerUser, service: PartnerServiceDep
) -> ApiResponse[PartnerInfoRead]:
    partner = await service.upload_documents(user, data)
    return ApiResponse[PartnerInfoRead](
        message="Documents uploaded", data=PartnerInfoRead.model_validate(partner)
    )


@router.post(
    "/complete-onboarding",
    responses={400: {"description": "Onboarding steps missing"}},
)
async def complete_onboarding(
    user: PartnerUser, service: PartnerServiceDep
) -> ApiResponse[PartnerInfoRead]:
    partner = await service.complete_onboarding(user)
    return ApiResponse[PartnerInfoRead](
        message="Onboarding completed. Your application is pending admin review.",
        data=PartnerInfoRead.model_validate(partner),
    )


# --- Verified partners only ---


@router.get("/dashboard", responses={403: {"description": "Partner is not verified"}})
async def get_dashboard(
    user: VerifiedPartner, service: PartnerServiceDep
) -> ApiResponse[DashboardData]:
    partner, total, active = await service.get_dashboard(user)
    return ApiResponse[DashboardData](
        data=DashboardData(
            partner=PartnerRead.from_records(user, partner),
            hotels=HotelCounts(total=total, active=active),
            onboarding=OnboardingStatusData.from_record(partner),
        )
    )


@router.get("/hotels")
async def list_my_hotels(
    user: VerifiedPartner, service: HotelServiceDep
) -> ApiResponse[HotelListData]:
    hotels = await service.list_for_owner(user)
    return ApiResponse[HotelListData](
        data=HotelListData(hotels=[HotelRead.model_validate(hotel) for hotel in hotels])
    )


@router.post("/hotels", status_code=status.HTTP_201_CREATED)
async def create_hotel(
    data: HotelCreate, user: VerifiedPartner, service: HotelServiceDep
) -> ApiResponse[HotelRead]:
    hotel = await service.create(user, data)
    return ApiResponse[HotelRead](
        message="Hotel created", data=HotelRead.model_validate(hotel)
    )


@router.patch("/hotels/{hotel_id}", responses={404: {"description": "Hotel not found"}})
async def update_hotel(
    hotel_id: UUID, data: HotelUpdate, user: VerifiedPartner, service: HotelServiceDep
) -> ApiResponse[HotelRead]:
    hotel = await service.update(user, hotel_id, data)
    return ApiResponse[HotelRead](
        message="Hotel updated", data=HotelRead.model_validate(hotel)
    )


@router.delete("/hotels/{hotel_id}", responses={404: {"description": "Hotel not found"}})
async def delete_hotel(
    hotel_id: UUID, user: VerifiedPartner, service: HotelServiceDep
) -> ApiResponse[None]:
    await service.delete(user, hotel_id)
    return ApiResponse[None](message="Hotel deleted")
