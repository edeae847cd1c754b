"""
Patient Model - Stores patient identity, contact and demographic information.

Each patient owns many medical records and at most one admission and one
billing record.
"""
from sqlalchemy import Column, Integer, String, DateTime, Date, Text, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base

class Gender(str, enum.Enum):
    """Gender options offered by the add-patient form."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

class BloodGroup(str, enum.Enum):
    """ABO/Rh blood groups."""
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

class Patient(Base):
    """
    Patient Model - Stores patient-specific information

    Fields:
    - id: Primary key for patient
    - full_name: Patient's full name
    - date_of_birth: Patient's date of birth
    - gender: Patient's gender (see Gender)
    - contact_number: Patient's phone number
    - email: Patient's email (optional)
    - address: Patient's address (optional)
    - emergency_contact_name: Emergency contact's name (optional)
    - emergency_contact_number: Emergency contact's phone (optional)
    - blood_group: Patient's blood group (see BloodGroup, optional)
    - allergies: Known allergies (optional)
    - created_at: When the patient was registered
    - updated_at: When the patient was last updated
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False, index=True)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String, nullable=False)
    contact_number = Column(String, nullable=False)
    email = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    emergency_contact_name = Column(String, nullable=True)
    emergency_contact_number = Column(String, nullable=True)
    blood_group = Column(String, nullable=True)
    allergies = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    medical_records = relationship(
        "MedicalRecord",
        back_populates="patient",
        cascade="all, delete-orphan",
        order_by="[MedicalRecord.created_at.desc(), MedicalRecord.id.desc()]",
    )
    admission = relationship("Admission", back_populates="patient", uselist=False, cascade="all, delete-orphan")
    billing = relationship("Billing", back_populates="patient", uselist=False, cascade="all, delete-orphan")

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, full_name={self.full_name})>"
