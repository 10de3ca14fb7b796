"""Public hotel browsing."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query

from src.checkinn.api.dependencies import HotelServiceDep
from src.checkinn.schemas import ApiResponse, HotelListData, HotelRead, PageMeta

router = APIRouter(prefix="/hotels", tags=["hotels"])

PageQuery = Annotated[int, Query(ge=1, description="Page number, starting at 1")]
LimitQuery = Annotated[int, Query(ge=1, le=100, description="Items per page")]


@router.get("")
async def list_hotels(
    service: HotelServiceDep,
    page: PageQuery = 1,
    limit: LimitQuery = 10,
    city: Annotated[str | None, Query(max_length=100)] = None,
) -> ApiResponse[HotelListData]:
    """List active hotels, optionally filtered by city."""
    hotels, total = await service.list_public(page, limit, city=city)
    return ApiResponse[HotelListData](
        data=HotelListData(
            hotels=[HotelRead.model_validate(hotel) for hotel in hotels],
            pagination=PageMeta.build(page, limit, total),
        )
    )


@router.get("/{hotel_id}", responses={404: {"description": "Hotel not found"}})
async def get_hotel(hotel_id: UUID, service: HotelServiceDep) -> ApiResponse[HotelRead]:
    hotel = await service.get_public(hotel_id)
    return ApiResponse[HotelRead](data=HotelRead.model_validate(hotel))
