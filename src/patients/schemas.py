"""
Patient Schemas - Pydantic models for patient data validation and serialization.

This module defines the add-patient form payload, the patient row returned
by list/search/detail endpoints, and the nested view used to build the
assistant's context.
"""
from typing import Annotated, Optional, List
from pydantic import BaseModel, BeforeValidator, Field, field_validator
from datetime import date, datetime

from ..core.validators import OptionalText, OptionalEmail, blank_to_none
from ..medical_records.schemas import MedicalRecordResponse
from ..admissions.schemas import AdmissionResponse
from ..billing.schemas import BillingResponse
from .models import Gender, BloodGroup

class PatientCreate(BaseModel):
    """
    Patient Creation Schema - Used by the add-patient form

    Required: full_name, date_of_birth, gender, contact_number.
    Optional inputs left blank are stored as null.
    """
    full_name: str = Field(..., min_length=1, description="Patient's full name")
    date_of_birth: date = Field(..., description="Patient's date of birth")
    gender: Gender = Field(..., description="Male, Female or Other")
    contact_number: str = Field(..., min_length=1, description="Patient's phone number")
    email: OptionalEmail = None
    address: OptionalText = None
    emergency_contact_name: OptionalText = None
    emergency_contact_number: OptionalText = None
    blood_group: Annotated[Optional[BloodGroup], BeforeValidator(blank_to_none)] = None
    allergies: OptionalText = None

    @field_validator("full_name", "contact_number")
    @classmethod
    def strip_required(cls, value: str) -> str:
        """Required text fields may not be whitespace only"""
        value = value.strip()
        if not value:
            raise ValueError("Field cannot be blank")
        return value

    class Config:
        """Store enum members as their plain values"""
        use_enum_values = True

class PatientResponse(BaseModel):
    """
    Patient Response Schema - Used when returning a patient row
    """
    id: int
    full_name: str
    date_of_birth: date
    gender: str
    contact_number: str
    email: Optional[str] = None
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_number: Optional[str] = None
    blood_group: Optional[str] = None
    allergies: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class PatientWithRecords(PatientResponse):
    """
    Patient joined with every child row: medical records (newest first),
    the admission and the billing record when present.
    """
    medical_records: List[MedicalRecordResponse] = []
    admission: Optional[AdmissionResponse] = None
    billing: Optional[BillingResponse] = None
