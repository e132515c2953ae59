"""Customer Pydantic Schemas"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from app.models.enums import PlanType
from app.schemas.common import CamelModel, Money


class CustomerBase(CamelModel):
    """Fields supplied by the operator; plan-derived fields are never accepted"""
    full_name: str = Field(..., min_length=1)
    address_street: str = Field(..., min_length=1)
    address_city: str = Field(..., min_length=1)
    address_zip: str = Field(..., min_length=1)
    landmark: Optional[str] = None
    contact_number: str = Field(..., min_length=1)
    email: EmailStr
    plan_type: PlanType
    subscription_start_date: date

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class CustomerCreate(CustomerBase):
    """Schema for registering a customer"""


class CustomerUpdate(CustomerBase):
    """Full-record replacement; a plan change recomputes bandwidth and fee"""


class CustomerResponse(CustomerBase):
    id: UUID
    email: str
    bandwidth_mbps: int
    monthly_fee: Money
    created_at: datetime
    updated_at: datetime


class CustomerSummary(CamelModel):
    """Customer fields joined into invoice reads"""
    id: UUID
    full_name: str
    email: str
    contact_number: str
    monthly_fee: Money
    plan_type: PlanType


class CustomerDeleted(CamelModel):
    message: str = "Customer deleted successfully"
    customer: CustomerResponse
