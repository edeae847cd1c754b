"""
Billing Model - Payment tracking for a patient.
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
import enum
from ..database import Base

class PaymentStatus(str, enum.Enum):
    """Payment status of a bill."""
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"

class Billing(Base):
    """
    Billing Model - At most one per patient (unique patient_id)

    Fields:
    - id: Primary key
    - patient_id: Foreign key to Patient model
    - total_amount: Amount billed
    - amount_paid: Amount received so far
    - amount_due: total_amount - amount_paid, fixed at creation
    - payment_status: pending, partial or paid
    - created_at: When the record was created
    """
    __tablename__ = "billing"

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.id", ondelete="CASCADE"), unique=True, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    amount_paid = Column(Numeric(12, 2), nullable=False, default=0)
    amount_due = Column(Numeric(12, 2), nullable=False)
    payment_status = Column(String, nullable=False, default=PaymentStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    patient = relationship("Patient", back_populates="billing")

    def __repr__(self):
        return f"<Billing(id={self.id}, patient_id={self.patient_id}, payment_status={self.payment_status})>"
