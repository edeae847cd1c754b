"""
Admission Router - Nested under /patients/{patient_id}/admission.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_active_user
from ..auth.models import User
from .schemas import AdmissionCreate, AdmissionResponse
from .service import create_admission, get_admission

router = APIRouter()

@router.post("/{patient_id}/admission", response_model=AdmissionResponse, status_code=status.HTTP_201_CREATED)
async def add_admission(
    patient_id: int,
    admission_data: AdmissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Add the admission record for a patient

    Each patient has at most one admission record; a second one is rejected with 409.
    """
    return create_admission(db, patient_id, admission_data)

@router.get("/{patient_id}/admission", response_model=Optional[AdmissionResponse])
async def get_patient_admission(
    patient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Get the patient's admission record, or null if none was added"""
    return get_admission(db, patient_id)
