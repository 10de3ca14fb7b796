"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.checkinn.api.dependencies.db import DBSession
from src.checkinn.repositories import (
    HotelRepository,
    PartnerRepository,
    RefreshTokenRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_partner_repository(session: DBSession) -> PartnerRepository:
    return PartnerRepository(session)


def get_token_repository(session: DBSession) -> RefreshTokenRepository:
    return RefreshTokenRepository(session)


def get_hotel_repository(session: DBSession) -> HotelRepository:
    return HotelRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
PartnerRepo = Annotated[PartnerRepository, Depends(get_partner_repository)]
TokenRepo = Annotated[RefreshTokenRepository, Depends(get_token_repository)]
HotelRepo = Annotated[HotelRepository, Depends(get_hotel_repository)]
