from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class TeamCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class TeamResponse(CamelModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class BillingAccountResponse(CamelModel):
    id: UUID
    plan: str
    next_invoice_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
