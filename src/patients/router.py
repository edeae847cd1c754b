"""
Patient Router - API endpoints for adding, listing, searching and viewing patients.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_active_user
from ..auth.models import User
from .schemas import PatientCreate, PatientResponse
from .service import create_patient, get_patient, list_patients

router = APIRouter()

@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def add_patient(
    patient_data: PatientCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Add a new patient

    Full name, date of birth, gender and contact number are required.
    """
    return create_patient(db, patient_data)

@router.get("", response_model=List[PatientResponse])
async def list_all_patients(
    search: Optional[str] = Query(None, description="Search patients by name, phone, or email"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    List patients, newest first

    With a search term, only patients whose name, phone or email contains
    it (case-insensitive) are returned.
    """
    return list_patients(db, search)

@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient_by_id(
    patient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Get a single patient by ID"""
    return get_patient(db, patient_id)
