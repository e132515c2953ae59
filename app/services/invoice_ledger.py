"""Invoice Ledger - durable invoice storage with read-time customer join"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Set, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateKeyError, InvalidInputError
from app.models.customer import Customer
from app.models.enums import InvoiceStatus, PaymentMethod
from app.models.invoice import Invoice
from app.schemas.customer import CustomerSummary
from app.schemas.invoice import InvoiceResponse
from app.services.customer_directory import CustomerDirectory
from app.utils.time import get_utc_now, to_naive_utc

logger = logging.getLogger(__name__)


class InvoiceLedger:
    """
    Service layer for invoices.

    Invoice rows carry only customer_id; customer details are joined in at
    read time through the CustomerDirectory this ledger is built with.
    """

    def __init__(self, db: AsyncSession, customers: CustomerDirectory):
        self.db = db
        self.customers = customers

    @staticmethod
    def _to_response(invoice: Invoice, customer: Optional[Customer]) -> InvoiceResponse:
        response = InvoiceResponse.model_validate(invoice)
        if customer is not None:
            response.customer = CustomerSummary.model_validate(customer)
        return response

    async def _resolve(self, invoice: Invoice) -> InvoiceResponse:
        return self._to_response(invoice, await self.customers.get(invoice.customer_id))

    async def issue(
        self,
        customer_id: UUID,
        invoice_number: str,
        amount: Decimal,
        billing_period: str,
        due_date: date,
        status: InvoiceStatus = InvoiceStatus.PENDING,
    ) -> InvoiceResponse:
        """
        Insert and commit an invoice. The customer is not checked for existence
        and no customer summary is attached (see attach_customers).

        The insert runs in its own SAVEPOINT so a rejected row leaves the
        session usable for further writes.

        Raises:
            DuplicateKeyError: invoice_number is already taken
        """
        invoice = Invoice(
            customer_id=customer_id,
            invoice_number=invoice_number,
            amount=amount,
            billing_period=billing_period,
            due_date=due_date,
            status=status,
        )
        try:
            async with self.db.begin_nested():
                self.db.add(invoice)
        except IntegrityError as exc:
            logger.warning(
                "Invoice number collision",
                extra={"invoice_number": invoice_number, "customer_id": str(customer_id)},
            )
            raise DuplicateKeyError("Invoice number already exists") from exc

        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

        return InvoiceResponse.model_validate(invoice)

    async def create(
        self,
        customer_id: UUID,
        invoice_number: str,
        amount: Decimal,
        billing_period: str,
        due_date: date,
        status: InvoiceStatus = InvoiceStatus.PENDING,
    ) -> InvoiceResponse:
        """Issue an invoice and return it with its customer summary"""
        issued = await self.issue(
            customer_id=customer_id,
            invoice_number=invoice_number,
            amount=amount,
            billing_period=billing_period,
            due_date=due_date,
            status=status,
        )
        return (await self.attach_customers([issued]))[0]

    async def attach_customers(self, invoices: List[InvoiceResponse]) -> List[InvoiceResponse]:
        """Fill in customer summaries with one lookup; unknown customers stay None"""
        customers = await self.customers.get_many(inv.customer_id for inv in invoices)
        for invoice in invoices:
            customer = customers.get(invoice.customer_id)
            invoice.customer = CustomerSummary.model_validate(customer) if customer else None
        return invoices

    async def list(self) -> List[InvoiceResponse]:
        """All invoices, newest first, with customer summaries joined in"""
        result = await self.db.execute(
            select(Invoice).order_by(Invoice.created_at.desc(), Invoice.invoice_number.desc())
        )
        invoices = result.scalars().all()
        customers = await self.customers.get_many(inv.customer_id for inv in invoices)
        return [self._to_response(inv, customers.get(inv.customer_id)) for inv in invoices]

    async def get_by_id(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        invoice = await self.db.get(Invoice, invoice_id)
        if not invoice:
            return None
        return await self._resolve(invoice)

    async def record_payment(
        self,
        invoice_id: UUID,
        payment_method: Union[PaymentMethod, str, None],
        payment_date: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> Optional[InvoiceResponse]:
        """
        Mark an invoice Paid. Calling it again on a Paid invoice overwrites
        the payment details.

        Raises:
            InvalidInputError: payment_method missing or not an accepted method

        Returns:
            Updated invoice or None if not found
        """
        if not payment_method:
            raise InvalidInputError("Payment method is required")
        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            raise InvalidInputError(
                f"Payment method must be one of: {', '.join(m.value for m in PaymentMethod)}"
            )

        invoice = await self.db.get(Invoice, invoice_id)
        if not invoice:
            return None

        invoice.status = InvoiceStatus.PAID
        invoice.payment_date = to_naive_utc(payment_date) if payment_date else get_utc_now()
        invoice.payment_method = method
        invoice.notes = notes

        await self.db.commit()
        await self.db.refresh(invoice)
        return await self._resolve(invoice)

    async def delete(self, invoice_id: UUID) -> Optional[InvoiceResponse]:
        """Hard delete. Returns the deleted invoice or None if not found."""
        invoice = await self.db.get(Invoice, invoice_id)
        if not invoice:
            return None

        deleted = await self._resolve(invoice)
        await self.db.delete(invoice)
        await self.db.commit()
        return deleted

    async def find_customer_ids_by_period_and_status(
        self, billing_period: str, status: InvoiceStatus
    ) -> Set[UUID]:
        """Customers holding at least one invoice with this period and status"""
        result = await self.db.execute(
            select(Invoice.customer_id)
            .where(
                Invoice.billing_period == billing_period,
                Invoice.status == status,
            )
            .distinct()
        )
        return {row[0] for row in result.all()}
