"""
Medical Record Model - Stores illnesses, symptoms, diagnoses and prescriptions.

A patient accumulates many records over time; they are only ever created and read.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from ..database import Base

class MedicalRecord(Base):
    """
    Medical Record Model - Stores patient medical records

    Fields:
    - id: Primary key for medical record
    - patient_id: Foreign key to Patient model
    - illness: Presenting illness
    - symptoms: Reported symptoms
    - diagnosis: Medical diagnosis (optional)
    - prescription: Prescribed medications (optional)
    - doctor_name: Attending doctor
    - notes: Additional notes (optional)
    - created_at: When the record was created
    """
    __tablename__ = "medical_records"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), nullable=False, index=True)
    illness = Column(String, nullable=False)
    symptoms = Column(Text, nullable=False)
    diagnosis = Column(Text, nullable=True)
    prescription = Column(Text, nullable=True)
    doctor_name = Column(String, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    patient = relationship("Patient", back_populates="medical_records")

    def __repr__(self):
        """String representation of the MedicalRecord model"""
        return f"<MedicalRecord(id={self.id}, patient_id={self.patient_id})>"
