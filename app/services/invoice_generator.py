"""Monthly Invoice Generator - bulk issuance per billing period"""

import logging
from datetime import date
from typing import Any, Dict, List

from app.core.exceptions import NoCustomersError
from app.models.enums import InvoiceStatus
from app.schemas.invoice import InvoiceResponse
from app.services.customer_directory import CustomerDirectory
from app.services.invoice_ledger import InvoiceLedger
from app.utils.invoice_numbers import generate_invoice_number

logger = logging.getLogger(__name__)


class InvoiceGenerator:
    """
    Issues one Pending invoice per customer for a billing period.

    Only a *Pending* invoice for the period counts as coverage: a customer
    whose invoice for the period is Paid or Overdue is billed again.
    """

    def __init__(self, customers: CustomerDirectory, ledger: InvoiceLedger):
        self.customers = customers
        self.ledger = ledger

    async def generate(self, billing_period: str, due_date: date) -> Dict[str, Any]:
        """
        Invoice every customer lacking a Pending invoice for billing_period.

        Each issuance stands alone: any failure (invoice number collision, store
        or driver error) is logged and the run moves on to the next customer.

        Raises:
            NoCustomersError: the roster is empty

        Returns:
            dict with message, created, skipped (roster size minus created),
            failed and the created invoices
        """
        roster = await self.customers.list_all()
        if not roster:
            raise NoCustomersError()

        already_invoiced = await self.ledger.find_customer_ids_by_period_and_status(
            billing_period, InvoiceStatus.PENDING
        )
        # Snapshot id and fee up front; per-item rollbacks must not touch roster state
        to_create = [(c.id, c.monthly_fee) for c in roster if c.id not in already_invoiced]

        if not to_create:
            logger.info(
                "Monthly invoices already issued",
                extra={"billing_period": billing_period, "roster": len(roster)},
            )
            return {
                "message": "All customers already have invoices for this billing period",
                "created": 0,
                "skipped": len(roster),
                "failed": 0,
                "invoices": [],
            }

        issued: List[InvoiceResponse] = []
        failed = 0
        for customer_id, monthly_fee in to_create:
            try:
                invoice = await self.ledger.issue(
                    customer_id=customer_id,
                    invoice_number=generate_invoice_number(),
                    amount=monthly_fee,
                    billing_period=billing_period,
                    due_date=due_date,
                    status=InvoiceStatus.PENDING,
                )
            except Exception:
                failed += 1
                logger.error(
                    f"Error creating invoice for customer {customer_id}",
                    extra={"billing_period": billing_period, "customer_id": str(customer_id)},
                    exc_info=True,
                )
                continue
            issued.append(invoice)

        # Every invoice in issued is committed; the summary lookup cannot change the counts
        try:
            invoices = await self.ledger.attach_customers(issued)
        except Exception:
            logger.error(
                "Customer lookup failed after monthly issuance",
                extra={"billing_period": billing_period},
                exc_info=True,
            )
            invoices = issued

        created = len(invoices)
        logger.info(
            "Monthly invoices generated",
            extra={
                "billing_period": billing_period,
                "created_count": created,
                "failed_count": failed,
                "roster": len(roster),
            },
        )
        return {
            "message": f"Successfully created {created} invoices",
            "created": created,
            "skipped": len(roster) - created,
            "failed": failed,
            "invoices": invoices,
        }
