"""Customer Directory - subscriber records and plan-derived billing attributes"""

from typing import Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.customer import Customer
from app.schemas.customer import CustomerCreate, CustomerUpdate
from app.services.plans import resolve_plan


class CustomerDirectory:
    """Service layer for customer records"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: CustomerCreate) -> Customer:
        """
        Register a customer. Bandwidth and monthly fee come from the plan
        catalogue, never from the caller.

        Raises:
            InvalidInputError: plan type is not in the catalogue
        """
        plan = resolve_plan(data.plan_type)
        customer = Customer(
            full_name=data.full_name,
            address_street=data.address_street,
            address_city=data.address_city,
            address_zip=data.address_zip,
            landmark=data.landmark,
            contact_number=data.contact_number,
            email=data.email,
            plan_type=data.plan_type,
            bandwidth_mbps=plan.bandwidth_mbps,
            monthly_fee=plan.monthly_fee,
            subscription_start_date=data.subscription_start_date,
        )
        self.db.add(customer)
        await self.db.commit()
        await self.db.refresh(customer)
        return customer

    async def list_all(self) -> List[Customer]:
        """The full roster, oldest registration first"""
        result = await self.db.execute(select(Customer).order_by(Customer.created_at))
        return list(result.scalars().all())

    async def get(self, customer_id: UUID) -> Optional[Customer]:
        return await self.db.get(Customer, customer_id)

    async def get_many(self, customer_ids: Iterable[UUID]) -> Dict[UUID, Customer]:
        """Return dict of id -> Customer for the ids that exist. One query for bulk lookup."""
        ids = set(customer_ids)
        if not ids:
            return {}
        result = await self.db.execute(select(Customer).where(Customer.id.in_(ids)))
        return {c.id: c for c in result.scalars().all()}

    async def update(self, customer_id: UUID, data: CustomerUpdate) -> Optional[Customer]:
        """
        Replace every operator-supplied field and recompute the plan-derived ones.

        Returns:
            Updated customer or None if not found
        """
        plan = resolve_plan(data.plan_type)
        customer = await self.get(customer_id)
        if not customer:
            return None

        for field, value in data.model_dump().items():
            setattr(customer, field, value)
        customer.bandwidth_mbps = plan.bandwidth_mbps
        customer.monthly_fee = plan.monthly_fee

        await self.db.commit()
        await self.db.refresh(customer)
        return customer

    async def delete(self, customer_id: UUID) -> Optional[Customer]:
        """Hard delete. Invoices referencing the customer are left untouched."""
        customer = await self.get(customer_id)
        if not customer:
            return None

        await self.db.delete(customer)
        await self.db.commit()
        return customer
