"""Customer endpoints"""

from typing import Any, List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from app.api import deps
from app.services.customer_directory import CustomerDirectory
from app.schemas.customer import CustomerCreate, CustomerDeleted, CustomerResponse, CustomerUpdate

router = APIRouter(dependencies=[Depends(deps.get_current_user)])


@router.get("", response_model=List[CustomerResponse])
async def list_customers(
    customers: CustomerDirectory = Depends(deps.get_customer_directory),
) -> Any:
    """List every customer."""
    return await customers.list_all()


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    customers: CustomerDirectory = Depends(deps.get_customer_directory),
) -> Any:
    """
    Register a customer. Bandwidth and monthly fee are derived from planType.
    """
    return await customers.create(customer_in)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: UUID,
    customers: CustomerDirectory = Depends(deps.get_customer_directory),
) -> Any:
    customer = await customers.get(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: UUID,
    customer_in: CustomerUpdate,
    customers: CustomerDirectory = Depends(deps.get_customer_directory),
) -> Any:
    """Replace a customer's record; a plan change recomputes bandwidth and fee."""
    customer = await customers.update(customer_id, customer_in)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", response_model=CustomerDeleted)
async def delete_customer(
    customer_id: UUID,
    customers: CustomerDirectory = Depends(deps.get_customer_directory),
) -> Any:
    """Delete a customer. Their invoices are kept."""
    customer = await customers.delete(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return CustomerDeleted(customer=CustomerResponse.model_validate(customer))
