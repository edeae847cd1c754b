"""
Medical Record Service - Business logic for a patient's medical history.
"""
from typing import List
from sqlalchemy.orm import Session
import logging

from ..database import save
from ..patients.service import get_patient
from .models import MedicalRecord
from .schemas import MedicalRecordCreate

# Set up logging
logger = logging.getLogger(__name__)

def create_medical_record(db: Session, patient_id: int, record_data: MedicalRecordCreate) -> MedicalRecord:
    """
    Add a medical record for a patient.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, patient_id)

    record = MedicalRecord(patient_id=patient_id, **record_data.model_dump())
    save(db, record, "adding the medical record")
    logger.info(f"Medical record {record.id} added for patient {patient_id}")
    return record

def list_medical_records(db: Session, patient_id: int) -> List[MedicalRecord]:
    """
    List a patient's medical records, newest first.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, patient_id)

    return (
        db.query(MedicalRecord)
        .filter(MedicalRecord.patient_id == patient_id)
        .order_by(MedicalRecord.created_at.desc(), MedicalRecord.id.desc())
        .all()
    )
