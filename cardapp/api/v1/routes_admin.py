# File: cardapp/api/v1/routes_admin.py

"""
Owner-only routes: every card across users, and the runtime log level.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from cardapp.api.deps import get_db, require_owner
from cardapp.core.logging import AVAILABLE_LEVELS, get_log_level, set_log_level
from cardapp.schemas.card import AdminCardRead
from cardapp.services.card_service import list_all_cards

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_owner)])


class LogLevelChange(BaseModel):
    level: str


@router.get("/cards", response_model=list[AdminCardRead], summary="All cards (owner only)")
def all_cards(db: Session = Depends(get_db)):
    return list_all_cards(db)


@router.get("/log-level")
def read_log_level():
    return {"currentLevel": get_log_level(), "availableLevels": AVAILABLE_LEVELS}


@router.post("/log-level")
def change_log_level(payload: LogLevelChange):
    level = set_log_level(payload.level)
    logger.warning("Log level changed to %s", level)
    return {"message": f"Log level changed to {level}", "currentLevel": level}
