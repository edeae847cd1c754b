"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string
        secret_key: Secret key for JWT token encoding
        algorithm: Algorithm used for JWT encoding (typically HS256)
        access_token_expire_minutes: Access token expiration time in minutes
        cors_origins: Frontend origins allowed to call the API

        # AI gateway settings
        ai_gateway_url: Chat-completion endpoint used by the patient assistant
        ai_gateway_api_key: Bearer key for the gateway (chat fails without it)
        ai_model: Model name sent with every completion request
        ai_gateway_timeout: Upstream request timeout in seconds

        # Bootstrap staff settings (optional)
        bootstrap_staff_email: Optional email for the first staff account
        bootstrap_staff_password: Optional password for the first staff account
    """
    # Database settings
    database_url: str = "sqlite:///./hospital.db"

    # JWT settings
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Frontend settings
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    # AI gateway settings
    ai_gateway_url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    ai_gateway_api_key: Optional[str] = None
    ai_model: str = "google/gemini-2.5-flash"
    ai_gateway_timeout: float = 60.0

    # Bootstrap staff settings (optional - only used when no account exists)
    bootstrap_staff_email: Optional[str] = None
    bootstrap_staff_password: Optional[str] = None

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

# Create settings instance
settings = Settings()
