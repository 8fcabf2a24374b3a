from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from cardapp.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False, "timeout": settings.store_timeout_seconds}
else:
    connect_args = {"connect_timeout": settings.store_timeout_seconds}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

