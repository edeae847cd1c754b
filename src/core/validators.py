"""
Shared field validators and annotated types for request schemas.
"""
from typing import Annotated, Any, Optional
from datetime import date
from pydantic import BeforeValidator, EmailStr

def blank_to_none(value: Any) -> Any:
    """
    Convert blank strings to None.

    HTML forms submit untouched optional inputs as "", which should be
    stored as NULL rather than an empty string.
    """
    if isinstance(value, str) and not value.strip():
        return None
    return value

OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(blank_to_none)]
OptionalInt = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]
