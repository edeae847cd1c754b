"""
Medical Record Router - Nested under /patients/{patient_id}/medical-records.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_active_user
from ..auth.models import User
from .schemas import MedicalRecordCreate, MedicalRecordResponse
from .service import create_medical_record, list_medical_records

router = APIRouter()

@router.post("/{patient_id}/medical-records", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def add_medical_record(
    patient_id: int,
    record_data: MedicalRecordCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Add a medical record for a patient"""
    return create_medical_record(db, patient_id, record_data)

@router.get("/{patient_id}/medical-records", response_model=List[MedicalRecordResponse])
async def get_medical_records(
    patient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """List a patient's medical records, newest first"""
    return list_medical_records(db, patient_id)
