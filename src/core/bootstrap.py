"""
Bootstrap utilities for first staff account creation.
Handles automatic creation of the first staff user from environment variables.
"""
import logging
from sqlalchemy.orm import Session

from ..auth.models import User
from ..config import settings
from .security import hash_password

logger = logging.getLogger(__name__)

def users_exist(db: Session) -> bool:
    """
    Check if any staff account exists in the database.

    Args:
        db: Database session

    Returns:
        bool: True if at least one user exists, False otherwise
    """
    return db.query(User).count() > 0

def create_bootstrap_staff(db: Session) -> bool:
    """
    Create the first staff account from environment variables.

    Args:
        db: Database session

    Returns:
        bool: True if the account was created, False otherwise
    """
    if not settings.bootstrap_staff_email or not settings.bootstrap_staff_password:
        logger.warning("Bootstrap staff credentials not provided in environment variables")
        return False

    try:
        user = User(
            email=settings.bootstrap_staff_email.lower(),
            full_name="Hospital Administrator",
            password_hash=hash_password(settings.bootstrap_staff_password),
            is_active=True,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"✅ Bootstrap staff account created: {user.email} (ID: {user.id})")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to create bootstrap staff account: {str(e)}")
        db.rollback()
        return False

def bootstrap_staff_if_needed(db: Session) -> None:
    """
    Create the bootstrap staff account when the users table is empty.
    Called during application startup.

    Args:
        db: Database session
    """
    logger.info("🔍 Checking for existing staff accounts...")

    if users_exist(db):
        logger.info("✅ Staff accounts found. Bootstrap not needed.")
        return

    if not create_bootstrap_staff(db):
        logger.info("💡 To create the first account, set BOOTSTRAP_STAFF_EMAIL and BOOTSTRAP_STAFF_PASSWORD in your .env file.")
