from fastapi import APIRouter

from src.checkinn.api.routes import admin_users, auth, hotels, partner

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(partner.router)
api_router.include_router(hotels.router)
api_router.include_router(admin_users.router)
