from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings


def connect_args_for(url: str) -> dict:
    # sqlite connections are shared across the request threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


settings = get_settings()
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args_for(settings.DATABASE_URL),
)


class Base(DeclarativeBase):
    """Declarative base for the workout tables."""


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    """Request-scoped session; closed after the response."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
