"""
Medical Record Schemas - Pydantic models for medical record validation and serialization.
"""
from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime

from ..core.validators import OptionalText

class MedicalRecordCreate(BaseModel):
    """
    Medical Record Creation Schema - Used by the add-record form

    Fields:
    - illness: Presenting illness (required)
    - symptoms: Reported symptoms (required)
    - doctor_name: Attending doctor (required)
    - diagnosis: Medical diagnosis (optional)
    - prescription: Prescribed medications (optional)
    - notes: Additional notes (optional)
    """
    illness: str = Field(..., min_length=1, description="Presenting illness")
    symptoms: str = Field(..., min_length=1, description="Reported symptoms")
    doctor_name: str = Field(..., min_length=1, description="Attending doctor")
    diagnosis: OptionalText = None
    prescription: OptionalText = None
    notes: OptionalText = None

class MedicalRecordResponse(BaseModel):
    """Medical Record Response Schema"""
    id: int
    patient_id: int
    illness: str
    symptoms: str
    doctor_name: str
    diagnosis: Optional[str] = None
    prescription: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
