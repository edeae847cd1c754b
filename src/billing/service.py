"""
Billing Service - Business logic for a patient's billing record.
"""
from typing import Optional
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy.orm import Session
import logging

from ..database import save
from ..exceptions import ResourceConflictException
from ..patients.service import get_patient
from .models import Billing
from .schemas import BillingCreate

# Set up logging
logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

def to_money(amount: Decimal) -> Decimal:
    """Round an amount to whole cents."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)

def compute_amount_due(total_amount: Decimal, amount_paid: Decimal) -> Decimal:
    """Outstanding balance: total minus paid."""
    return total_amount - amount_paid

def get_billing(db: Session, patient_id: int) -> Optional[Billing]:
    """
    Get a patient's billing record, or None when there is none.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    get_patient(db, patient_id)
    return db.query(Billing).filter(Billing.patient_id == patient_id).first()

def create_billing(db: Session, patient_id: int, billing_data: BillingCreate) -> Billing:
    """
    Add the billing record for a patient.

    Both amounts are rounded to cents, then amount_due is computed here,
    once, from total_amount and amount_paid.

    Raises:
        ResourceNotFoundException: If the patient does not exist
        ResourceConflictException: If the patient already has a billing record
    """
    if get_billing(db, patient_id):
        logger.warning(f"Billing rejected: patient {patient_id} already has one")
        raise ResourceConflictException("Patient already has a billing record")

    total_amount = to_money(billing_data.total_amount)
    amount_paid = to_money(billing_data.amount_paid)
    billing = Billing(
        patient_id=patient_id,
        total_amount=total_amount,
        amount_paid=amount_paid,
        amount_due=compute_amount_due(total_amount, amount_paid),
        payment_status=billing_data.payment_status.value,
    )
    save(db, billing, "adding the billing record")
    logger.info(f"Billing {billing.id} added for patient {patient_id} (due {billing.amount_due})")
    return billing
