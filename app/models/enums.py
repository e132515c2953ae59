"""Centralized Enum Definitions"""

import enum


# Customers
class PlanType(str, enum.Enum):
    """Internet plans offered to subscribers"""
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


# Invoices
class InvoiceStatus(str, enum.Enum):
    """Invoice status. Only PENDING -> PAID is ever performed; OVERDUE is advisory."""
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


class PaymentMethod(str, enum.Enum):
    """Accepted ways of settling an invoice"""
    CASH = "Cash"
    BANK_TRANSFER = "Bank Transfer"
    ONLINE_PAYMENT = "Online Payment"
    OTHER = "Other"
