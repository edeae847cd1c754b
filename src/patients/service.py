"""
Patient Service - Business logic for patient registration, listing and search.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import or_
import logging

from ..database import save
from ..exceptions import ResourceNotFoundException
from .models import Patient
from .schemas import PatientCreate

# Set up logging
logger = logging.getLogger(__name__)

def create_patient(db: Session, patient_data: PatientCreate) -> Patient:
    """
    Insert one patient row from the add-patient form.

    Args:
        db: Database session
        patient_data: Validated form data

    Returns:
        Patient: The created patient
    """
    patient = Patient(**patient_data.model_dump())
    save(db, patient, "adding the patient")
    logger.info(f"Patient {patient.id} added")
    return patient

def get_patient(db: Session, patient_id: int) -> Patient:
    """
    Get a patient by ID.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    patient = db.query(Patient).filter(Patient.id == patient_id).first()
    if not patient:
        raise ResourceNotFoundException("Patient not found")
    return patient

def list_patients(db: Session, search: Optional[str] = None) -> List[Patient]:
    """
    List patients newest first, optionally filtered by a search query.

    A non-blank query keeps patients whose name, phone or email contains it
    as typed, ignoring case. A blank or whitespace-only query returns every
    patient.

    Args:
        db: Database session
        search: Free-text query from the dashboard search box

    Returns:
        List of matching patients
    """
    query = db.query(Patient)

    if search and search.strip():
        query = query.filter(
            or_(
                Patient.full_name.icontains(search, autoescape=True),
                Patient.contact_number.icontains(search, autoescape=True),
                Patient.email.icontains(search, autoescape=True),
            )
        )

    return query.order_by(Patient.created_at.desc(), Patient.id.desc()).all()

def list_patients_with_records(db: Session) -> List[Patient]:
    """
    Load every patient with medical records, admission and billing attached.

    Used to build the assistant's context; there is no paging or size limit.
    """
    return (
        db.query(Patient)
        .options(
            selectinload(Patient.medical_records),
            selectinload(Patient.admission),
            selectinload(Patient.billing),
        )
        .order_by(Patient.created_at.desc(), Patient.id.desc())
        .all()
    )
