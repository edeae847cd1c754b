"""
Admission Model - Bed assignment and occupancy status for a patient.
"""
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from ..database import Base

class Admission(Base):
    """
    Admission Model - At most one per patient (unique patient_id)

    Fields:
    - id: Primary key
    - patient_id: Foreign key to Patient model
    - is_admitted: True while the patient occupies a bed
    - floor_number: Ward floor (optional)
    - room_number: Room label (optional)
    - admission_date: Date of admission
    - discharge_date: Date of discharge (optional)
    - created_at: When the record was created
    """
    __tablename__ = "admissions"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), unique=True, nullable=False)
    is_admitted = Column(Boolean, default=True, nullable=False)
    floor_number = Column(Integer, nullable=True)
    room_number = Column(String, nullable=True)
    admission_date = Column(Date, nullable=True)
    discharge_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    patient = relationship("Patient", back_populates="admission")

    def __repr__(self):
        return f"<Admission(id={self.id}, patient_id={self.patient_id}, is_admitted={self.is_admitted})>"
