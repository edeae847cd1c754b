"""
User Schemas - Pydantic models for staff account validation and serialization.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

class UserBase(BaseModel):
    """
    Base User Schema - Contains fields common to all user-related schemas

    Fields:
    - email: User's email address
    - full_name: User's full name
    """
    email: EmailStr
    full_name: str = Field(..., min_length=1)

class UserCreate(UserBase):
    """
    User Creation Schema - Used when registering a staff account

    Extends UserBase with:
    - password: User's plain text password (will be hashed before storage)
    """
    password: str = Field(..., min_length=8)

class UserLogin(BaseModel):
    """
    User Login Schema - Used for authentication

    Fields:
    - email: User's email address
    - password: User's plain text password
    """
    email: EmailStr
    password: str

class UserResponse(UserBase):
    """
    User Response Schema - Used when returning user data
    """
    id: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class LoginResponse(BaseModel):
    """
    Login Response Schema - Returned after successful authentication

    Fields:
    - access_token: JWT access token
    - token_type: Type of token (always "bearer")
    - user: User information
    """
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
