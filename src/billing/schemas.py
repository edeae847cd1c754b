"""
Billing Schemas - Pydantic models for billing validation and serialization.
"""
from typing import Annotated, Optional
from pydantic import BaseModel, Field, PlainSerializer
from datetime import datetime
from decimal import Decimal

from .models import PaymentStatus

# Money is stored as Decimal and sent over JSON as a number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class BillingCreate(BaseModel):
    """
    Billing Creation Schema - Used by the add-billing form

    amount_due is not accepted; it is derived from the two amounts.
    Amounts with more than two decimals are rounded by the service.

    Fields:
    - total_amount: Amount billed (required)
    - amount_paid: Amount received so far (default 0)
    - payment_status: pending, partial or paid (default pending)
    """
    total_amount: Decimal = Field(..., ge=0, description="Amount billed")
    amount_paid: Decimal = Field(Decimal("0"), ge=0, description="Amount received so far")
    payment_status: PaymentStatus = PaymentStatus.PENDING

class BillingResponse(BaseModel):
    """Billing Response Schema"""
    id: int
    patient_id: int
    total_amount: Money
    amount_paid: Money
    amount_due: Money
    payment_status: PaymentStatus
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True
