# File: cardapp/api/v1/routes_debug.py

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from cardapp.api.deps import require_admin
from cardapp.models.user import User
from cardapp.schemas.user import UserRead

router = APIRouter()


@router.get("/whoami", summary="Current user as seen by the auth layer (admin only)")
def whoami(user: User = Depends(require_admin)):
    return {
        "message": "Debug - Current User Info",
        "authenticated": True,
        "user": UserRead.model_validate(user).model_dump(by_alias=True, mode="json"),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
