"""Invoice ledger rows"""

from sqlalchemy import Column, Date, DateTime, Numeric, String, Text, Uuid

from app.models.base import BaseModel, enum_column
from app.models.enums import InvoiceStatus, PaymentMethod


class Invoice(BaseModel):
    """
    A bill issued to a customer for one billing period.

    customer_id is a weak reference: there is no foreign key, deleting a
    customer leaves its invoices in place and they resolve to no customer.
    """
    __tablename__ = "invoices"

    customer_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    invoice_number = Column(String(32), unique=True, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    billing_period = Column(String(32), nullable=False, index=True)
    due_date = Column(Date, nullable=False)
    status = Column(
        enum_column(InvoiceStatus, "invoice_status"),
        default=InvoiceStatus.PENDING,
        nullable=False,
        index=True,
    )

    # Payment
    payment_date = Column(DateTime, nullable=True)
    payment_method = Column(enum_column(PaymentMethod, "payment_method"), nullable=True)
    notes = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Invoice {self.invoice_number} {self.amount} - {self.status}>"
