"""
Authentication routes for the hospital patient management system.
"""
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from .models import User
from .schemas import UserCreate, UserLogin, UserResponse, LoginResponse
from .dependencies import get_current_active_user
from .service import register_user, login_user

# Set up logging
logger = logging.getLogger(__name__)

# Create API router
router = APIRouter()

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Staff Registration")
async def register_route(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Create a staff account.

    Returns the created user. Duplicate emails are rejected with 400.
    """
    return register_user(db, user_data)

@router.post("/login", response_model=LoginResponse, summary="User Login")
async def login_route(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    User login endpoint.

    Args:
        login_data: User login credentials
        db: Database session

    Returns:
        LoginResponse with access token and user information
    """
    return login_user(db, login_data.email, login_data.password)

@router.post("/token", summary="OAuth2 Token")
async def oauth2_token_route(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    OAuth2 token endpoint for the interactive API docs.

    OAuth2 clients send the email in the 'username' field.
    """
    result = login_user(db, form_data.username, form_data.password)
    return {
        "access_token": result["access_token"],
        "token_type": result["token_type"],
    }

@router.get("/me", response_model=UserResponse, summary="Get Current User Profile")
async def get_current_user_profile(current_user: User = Depends(get_current_active_user)):
    """Return the signed-in staff member."""
    return current_user

@router.post("/logout", status_code=status.HTTP_200_OK, summary="User Logout")
async def logout_route(current_user: User = Depends(get_current_active_user)):
    """
    Acknowledge a sign-out.

    Tokens are stateless; the client discards its copy.
    """
    logger.info(f"User {current_user.id} signed out")
    return {"message": "Successfully logged out. Please discard your token."}
