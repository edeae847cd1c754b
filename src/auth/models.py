"""
User Model - Stores staff accounts allowed to use the patient management system.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from ..database import Base

class User(Base):
    """
    User Model - Stores staff account information

    Fields:
    - id: Primary key for user identification
    - email: Unique email address used to sign in
    - full_name: Staff member's complete name
    - password_hash: Securely hashed password (never store raw passwords)
    - is_active: Whether the account may sign in
    - created_at: Timestamp when user was created
    - updated_at: Timestamp when user was last updated
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        """String representation of the User model"""
        return f"<User(id={self.id}, email={self.email})>"
