"""
Billing Router - Nested under /patients/{patient_id}/billing.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..auth.dependencies import get_current_active_user
from ..auth.models import User
from .schemas import BillingCreate, BillingResponse
from .service import create_billing, get_billing

router = APIRouter()

@router.post("/{patient_id}/billing", response_model=BillingResponse, status_code=status.HTTP_201_CREATED)
async def add_billing(
    patient_id: int,
    billing_data: BillingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """
    Add the billing record for a patient

    The amount due is derived from the total and the amount paid.
    """
    return create_billing(db, patient_id, billing_data)

@router.get("/{patient_id}/billing", response_model=Optional[BillingResponse])
async def get_patient_billing(
    patient_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user)
):
    """Get the patient's billing record, or null if none was added"""
    return get_billing(db, patient_id)
