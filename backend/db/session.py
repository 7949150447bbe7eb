"""Database session management"""
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from config.settings import settings


def build_engine(database_url: str):
    """
    Create the SQLAlchemy engine for the workers store.

    SQLite (local development) needs check_same_thread disabled because
    FastAPI may hand the session to a different thread than the one that
    opened it. Server databases get pre-ping and recycling.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )


# Create engine (opened once, connection pool shared by all requests)
engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Usage in FastAPI:
        from fastapi import Depends
        from db.session import get_db

        @router.get("/workers")
        def read_workers(db: Session = Depends(get_db)):
            return list_workers(db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
