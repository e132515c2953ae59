"""Billing account settings"""

from sqlalchemy import Column, Date, String

from app.models.base import BaseModel


class BillingAccount(BaseModel):
    """
    Single-row record of the back-office's own subscription.
    Created with defaults the first time it is read.
    """
    __tablename__ = "billing_accounts"

    plan = Column(String(50), nullable=False, default="free")
    next_invoice_date = Column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<BillingAccount {self.plan}>"
