"""
Authentication Service - Business logic for staff accounts and login.
"""
from typing import Dict, Any
from sqlalchemy.orm import Session
import logging

from ..database import save
from ..core.security import hash_password, verify_password, create_access_token
from .models import User
from .schemas import UserCreate, UserResponse
from .exceptions import (
    InvalidCredentialsException,
    EmailAlreadyExistsException,
    InactiveAccountException,
)

# Set up logging
logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> User:
    """Look up a user by email (case-insensitive). Returns None if absent."""
    return db.query(User).filter(User.email == email.lower()).first()

def register_user(db: Session, user_data: UserCreate) -> User:
    """
    Register a new staff account.

    Args:
        db: Database session
        user_data: Registration data

    Returns:
        User: The created user

    Raises:
        EmailAlreadyExistsException: If the email is already registered
    """
    if get_user_by_email(db, user_data.email):
        logger.warning(f"Registration failed: {user_data.email} already exists")
        raise EmailAlreadyExistsException()

    user = User(
        email=user_data.email.lower(),
        full_name=user_data.full_name,
        password_hash=hash_password(user_data.password),
        is_active=True,
    )
    save(db, user, "creating the user account")
    logger.info(f"Registered staff user {user.id} ({user.email})")
    return user

def login_user(db: Session, email: str, password: str) -> Dict[str, Any]:
    """
    Authenticate a user and generate an access token.

    Args:
        db: Database session
        email: User's email address
        password: User's password

    Returns:
        Dict with access token and user information

    Raises:
        InvalidCredentialsException: If credentials are invalid
        InactiveAccountException: If the account is deactivated
    """
    user = get_user_by_email(db, email)

    if not user or not verify_password(password, user.password_hash):
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    if not user.is_active:
        logger.warning(f"Login failed: Account {user.id} is deactivated")
        raise InactiveAccountException()

    access_token = create_access_token({"id": user.id, "email": user.email})
    logger.info(f"Login successful: User {user.id} ({user.email})")

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "user": UserResponse.model_validate(user),
    }
