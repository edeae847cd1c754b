"""
Admission Schemas - Pydantic models for admission validation and serialization.
"""
from typing import Optional
from pydantic import BaseModel, Field
from datetime import date, datetime

from ..core.validators import OptionalText, OptionalInt, OptionalDate

class AdmissionCreate(BaseModel):
    """
    Admission Creation Schema - Used by the add-admission form

    Fields:
    - is_admitted: Whether the patient currently occupies a bed (default True)
    - admission_date: Date of admission (defaults to today)
    - floor_number: Ward floor (optional)
    - room_number: Room label (optional)
    - discharge_date: Date of discharge (optional)
    """
    is_admitted: bool = True
    admission_date: date = Field(default_factory=date.today)
    floor_number: OptionalInt = Field(None, ge=0, description="Ward floor")
    room_number: OptionalText = None
    discharge_date: OptionalDate = None

class AdmissionResponse(BaseModel):
    """Admission Response Schema"""
    id: int
    patient_id: int
    is_admitted: bool
    floor_number: Optional[int] = None
    room_number: Optional[str] = None
    admission_date: Optional[date] = None
    discharge_date: Optional[date] = None
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
