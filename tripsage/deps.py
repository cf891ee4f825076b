"""Dependency injection setup for FastAPI."""

import secrets
from typing import AsyncGenerator, Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from tripsage.config import Settings, get_settings
from tripsage.db.base import Base
from tripsage.generation.orchestrator import GenerationOrchestrator
from tripsage.generation.spend_cap import SpendCapManager


# Database setup
engine = None
SessionLocal = None


def init_database(settings: Settings) -> None:
    """Initialize database connection."""
    global engine, SessionLocal
    engine = create_engine(
        settings.database_url,
        connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {},
        echo=settings.debug,
    )
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    # Create tables
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    if SessionLocal is None:
        raise RuntimeError("Database not initialized")

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def get_orchestrator(
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
) -> AsyncGenerator[GenerationOrchestrator, None]:
    """Per-request orchestrator recording its calls in the usage ledger."""
    orchestrator = GenerationOrchestrator(settings, spend_cap=SpendCapManager(settings, db))
    try:
        yield orchestrator
    finally:
        await orchestrator.close()


# HTTP Basic Auth for admin
security = HTTPBasic()


def get_admin_user(
    credentials: HTTPBasicCredentials = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """Authenticate admin user."""
    if not settings.admin_password:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin access is not configured",
            headers={"WWW-Authenticate": "Basic"},
        )

    is_correct_username = secrets.compare_digest(credentials.username, settings.admin_username)
    is_correct_password = secrets.compare_digest(credentials.password, settings.admin_password)

    if not (is_correct_username and is_correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
