# File: cardapp/api/routes_info.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cardapp.api.deps import get_db
from cardapp.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["info"])

API = settings.api_v1_prefix


@router.get("/")
def root():
    return {
        "message": "Card App Server is running",
        "environment": settings.environment,
        "status": "operational",
    }


@router.get("/healthz")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
        "version": settings.VERSION,
    }


@router.get("/debug/db")
def database_status(db: Session = Depends(get_db)):
    bind = db.get_bind()
    try:
        db.execute(text("SELECT 1"))
        status = "connected"
    except SQLAlchemyError as exc:
        logger.error("Database status check failed: %s", exc)
        status = "disconnected"
    return {
        "database": {
            "status": status,
            "dialect": bind.dialect.name,
            "name": bind.url.database,
        }
    }


@router.get(API)
def api_index():
    return {
        "message": "Card App API is running",
        "endpoints": {
            "register": f"POST {API}/auth/register",
            "login": f"POST {API}/auth/login",
            "profile": f"GET {API}/auth/profile (requires authentication)",
            "getUserCards": f"GET {API}/cards/ (requires authentication)",
            "getCardStats": f"GET {API}/cards/stats (requires authentication)",
            "getCardById": f"GET {API}/cards/:id (requires authentication)",
            "createCard": f"POST {API}/cards/ (requires authentication)",
            "updateCard": f"PUT {API}/cards/:id (requires authentication)",
            "deleteCard": f"DELETE {API}/cards/:id (requires admin)",
            "databaseStatus": "GET /debug/db",
            "allCards": f"GET {API}/admin/cards (requires owner)",
            "logLevel": f"GET|POST {API}/admin/log-level (requires owner)",
            "whoami": f"GET {API}/debug/whoami (requires admin)",
        },
    }
