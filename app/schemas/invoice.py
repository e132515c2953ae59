"""Invoice Pydantic Schemas"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from app.models.enums import InvoiceStatus, PaymentMethod
from app.schemas.common import CamelModel, Money
from app.schemas.customer import CustomerSummary


class InvoiceCreate(CamelModel):
    """Direct issuance of a single invoice"""
    customer_id: UUID
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    billing_period: str = Field(..., min_length=1, max_length=32, examples=["2024-01"])
    due_date: date


class MonthlyInvoiceRequest(CamelModel):
    billing_period: str = Field(..., min_length=1, max_length=32, examples=["2024-01"])
    due_date: date


class PaymentRecord(CamelModel):
    """Payment details; payment_date defaults to the time of recording"""
    payment_date: Optional[datetime] = None
    payment_method: PaymentMethod
    notes: Optional[str] = None


class InvoiceResponse(CamelModel):
    id: UUID
    customer_id: UUID
    customer: Optional[CustomerSummary] = None
    invoice_number: str
    amount: Money
    billing_period: str
    due_date: date
    status: InvoiceStatus
    payment_date: Optional[datetime] = None
    payment_method: Optional[PaymentMethod] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class MonthlyInvoiceResult(CamelModel):
    """
    Outcome of a monthly run.

    skipped counts every roster member that did not get a new invoice, whether
    it already had a pending one or its issuance failed; failed counts only
    the latter.
    """
    message: str
    created: int
    skipped: int
    failed: int = 0
    invoices: List[InvoiceResponse] = Field(default_factory=list)


class InvoiceDeleted(CamelModel):
    message: str = "Invoice deleted successfully"
    invoice: InvoiceResponse
