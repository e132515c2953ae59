"""Models Package - Export all models for easy imports"""

from app.models.base import BaseModel
from app.models.enums import PlanType, InvoiceStatus, PaymentMethod
from app.models.user import User
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.models.team import Team
from app.models.billing import BillingAccount


__all__ = [
    # Base classes
    "BaseModel",

    # Enums
    "PlanType",
    "InvoiceStatus",
    "PaymentMethod",

    # Accounts
    "User",

    # Customers
    "Customer",

    # Invoices
    "Invoice",

    # Workspace
    "Team",
    "BillingAccount",
]
