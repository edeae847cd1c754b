"""
Database connection and session management.
Provides SQLAlchemy engine, session, and base class for models.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from fastapi import status
import logging

from .config import settings
from .exceptions import AppException

# Set up logging
logger = logging.getLogger(__name__)

# SQLite connections are shared across FastAPI's threadpool
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

# Create SQLAlchemy engine for database connection
engine = create_engine(settings.database_url, connect_args=connect_args)

# Create session factory for database sessions
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

# Create base class for declarative models
Base = declarative_base()

def get_db():
    """
    Database dependency - Creates and yields a database session.

    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.

    Yields:
        SQLAlchemy Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def save(db: Session, instance, action: str):
    """
    Add an instance, commit and refresh it.

    Args:
        db: Database session
        instance: Model instance to persist
        action: Short description used in log lines and the error message

    Returns:
        The refreshed instance

    Raises:
        AppException: If the commit fails (the session is rolled back)
    """
    db.add(instance)
    try:
        db.commit()
        db.refresh(instance)
        return instance
    except Exception as e:
        db.rollback()
        logger.error(f"Error while {action}: {str(e)}")
        raise AppException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while {action}"
        )
