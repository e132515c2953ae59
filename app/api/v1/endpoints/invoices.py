"""Invoice endpoints - single issuance, monthly generation, payments"""

from typing import Any, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from app.api import deps
from app.services.invoice_generator import InvoiceGenerator
from app.services.invoice_ledger import InvoiceLedger
from app.schemas.invoice import (
    InvoiceCreate, InvoiceDeleted, InvoiceResponse, MonthlyInvoiceRequest,
    MonthlyInvoiceResult, PaymentRecord
)
from app.utils.invoice_numbers import generate_invoice_number

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("", response_model=List[InvoiceResponse])
async def list_invoices(
    ledger: InvoiceLedger = Depends(deps.get_invoice_ledger),
) -> Any:
    """All invoices, newest first, with customer details."""
    return await ledger.list()


@router.post(
    "/generate-monthly",
    response_model=MonthlyInvoiceResult,
    status_code=status.HTTP_201_CREATED,
)
async def generate_monthly_invoices(
    request_in: MonthlyInvoiceRequest,
    generator: InvoiceGenerator = Depends(deps.get_invoice_generator),
) -> Any:
    """
    Invoice every customer that has no Pending invoice for billingPeriod.
    Customers already covered are skipped; individual failures do not stop the run.
    """
    result = await generator.generate(request_in.billing_period, request_in.due_date)
    return MonthlyInvoiceResult(**result)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice(
    invoice_id: UUID,
    ledger: InvoiceLedger = Depends(deps.get_invoice_ledger),
) -> Any:
    invoice = await ledger.get_by_id(invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_invoice(
    invoice_in: InvoiceCreate,
    ledger: InvoiceLedger = Depends(deps.get_invoice_ledger),
) -> Any:
    """Issue one Pending invoice with a freshly generated invoice number."""
    return await ledger.create(
        customer_id=invoice_in.customer_id,
        invoice_number=generate_invoice_number(),
        amount=invoice_in.amount,
        billing_period=invoice_in.billing_period,
        due_date=invoice_in.due_date,
    )


@router.put("/{invoice_id}/payment", response_model=InvoiceResponse)
async def record_payment(
    invoice_id: UUID,
    payment_in: PaymentRecord,
    ledger: InvoiceLedger = Depends(deps.get_invoice_ledger),
) -> Any:
    """Mark an invoice Paid and store the payment details."""
    invoice = await ledger.record_payment(
        invoice_id,
        payment_method=payment_in.payment_method,
        payment_date=payment_in.payment_date,
        notes=payment_in.notes,
    )
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.delete("/{invoice_id}", response_model=InvoiceDeleted)
async def delete_invoice(
    invoice_id: UUID,
    ledger: InvoiceLedger = Depends(deps.get_invoice_ledger),
) -> Any:
    invoice = await ledger.delete(invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return InvoiceDeleted(invoice=invoice)
