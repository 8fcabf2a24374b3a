# File: cardapp/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Card App API"
    VERSION: str = "1.0.0"

    api_v1_prefix: str = "/api/v1"
    environment: str = os.getenv("APP_ENV", "development")

    # CORS
    backend_cors_origins: List[str] = os.getenv(
        "BACKEND_CORS_ORIGINS", "http://localhost:3000,http://localhost:4000"
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./cardapp.db")
    store_timeout_seconds: int = int(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

    # Security / auth
    secret_key: str = os.getenv("JWT_SECRET", "CHANGE_ME_IN_PRODUCTION")
    access_token_expire_minutes: int = 60 * 24  # 24h
    algorithm: str = "HS256"
    min_password_length: int = 6

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Accounts created on first boot
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    owner_username: str = os.getenv("OWNER_USERNAME", "owner")
    owner_email: str = os.getenv("OWNER_EMAIL", "owner@example.com")
    owner_password: str = os.getenv("OWNER_PASSWORD", "owner123")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
