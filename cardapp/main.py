# cardapp/main.py

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardapp.core.config import settings
from cardapp.core.errors import CardAppError
from cardapp.core.logging import setup_logging
from cardapp.api.routes_info import router as info_router
from cardapp.api.v1.api import api_router
from cardapp.db.init_db import init_db, seed_initial_data
from cardapp.db.session import SessionLocal, engine

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s %s (%s)", settings.PROJECT_NAME, settings.VERSION, settings.environment)
    init_db(engine)
    logger.info("Database tables initialized")

    db = SessionLocal()
    try:
        seed_initial_data(db)
    finally:
        db.close()

    yield
    logger.info("Shutting down")


async def handle_card_app_error(request: Request, exc: CardAppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ---------- REQUEST LOGGING ----------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # ---------- ERRORS ----------
    app.add_exception_handler(CardAppError, handle_card_app_error)

    # ---------- ROUTERS ----------
    app.include_router(info_router)
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_application()
