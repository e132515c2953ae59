"""Subscriber records"""

from sqlalchemy import Column, Date, Integer, Numeric, String

from app.models.base import BaseModel, enum_column
from app.models.enums import PlanType


class Customer(BaseModel):
    """
    An internet subscriber.
    bandwidth_mbps and monthly_fee mirror the plan catalogue entry for plan_type
    and are only ever written by CustomerDirectory.
    """
    __tablename__ = "customers"

    full_name = Column(String(255), nullable=False)

    # Address
    address_street = Column(String(255), nullable=False)
    address_city = Column(String(120), nullable=False)
    address_zip = Column(String(20), nullable=False)
    landmark = Column(String(255), nullable=True)

    # Contact
    contact_number = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, index=True)

    # Subscription
    plan_type = Column(enum_column(PlanType, "plan_type"), nullable=False, index=True)
    bandwidth_mbps = Column(Integer, nullable=False)
    monthly_fee = Column(Numeric(10, 2), nullable=False)
    subscription_start_date = Column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Customer {self.full_name} ({self.plan_type})>"
