"""
Admission Service - Business logic for a patient's admission record.
"""
from typing import Optional
from sqlalchemy.orm import Session
import logging

from ..database import save
from ..exceptions import ResourceConflictException
from ..patients.service import get_patient
from .models import Admission
from .schemas import AdmissionCreate

# Set up logging
logger = logging.getLogger(__name__)

def get_admission(db: Session, patient_id: int) -> Optional[Admission]:
    """
    Get a patient's admission record, or None when there is none.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, patient_id)
    return db.query(Admission).filter(Admission.patient_id == patient_id).first()

def create_admission(db: Session, patient_id: int, admission_data: AdmissionCreate) -> Admission:
    """
    Add the admission record for a patient.

    Raises:
        ResourceNotFoundException: If the patient does not exist
        ResourceConflictException: If the patient already has an admission
    """
    if get_admission(db, patient_id):
        logger.warning(f"Admission rejected: patient {patient_id} already has one")
        raise ResourceConflictException("Patient already has an admission record")

    admission = Admission(patient_id=patient_id, **admission_data.model_dump())
    save(db, admission, "adding the admission record")
    logger.info(f"Admission {admission.id} added for patient {patient_id}")
    return admission
