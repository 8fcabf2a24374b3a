from fastapi import APIRouter

from cardapp.api.v1.routes_auth import router as auth_router
from cardapp.api.v1.routes_cards import router as cards_router
from cardapp.api.v1.routes_admin import router as admin_router
from cardapp.api.v1.routes_debug import router as debug_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(cards_router, prefix="/cards", tags=["cards"])
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(debug_router, prefix="/debug", tags=["debug"])
