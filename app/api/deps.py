"""API Dependencies

Services are built per request from the request's session and handed to the
endpoints; nothing below is a module-level singleton.
"""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.core.security import decode_token
from app.models.user import User
from app.services.customer_directory import CustomerDirectory
from app.services.invoice_generator import InvoiceGenerator
from app.services.invoice_ledger import InvoiceLedger
from app.services.user_service import UserService
from app.services.workspace_service import BillingAccountService, TeamService

# Security scheme for bearer token; missing credentials are reported by get_current_user
security = HTTPBearer(auto_error=False)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


def get_customer_directory(db: AsyncSession = Depends(get_db)) -> CustomerDirectory:
    return CustomerDirectory(db)


def get_invoice_ledger(
    db: AsyncSession = Depends(get_db),
    customers: CustomerDirectory = Depends(get_customer_directory),
) -> InvoiceLedger:
    return InvoiceLedger(db, customers)


def get_invoice_generator(
    customers: CustomerDirectory = Depends(get_customer_directory),
    ledger: InvoiceLedger = Depends(get_invoice_ledger),
) -> InvoiceGenerator:
    return InvoiceGenerator(customers, ledger)


def get_team_service(db: AsyncSession = Depends(get_db)) -> TeamService:
    return TeamService(db)


def get_billing_account_service(db: AsyncSession = Depends(get_db)) -> BillingAccountService:
    return BillingAccountService(db)


async def get_current_user(
    users: UserService = Depends(get_user_service),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    """
    Get current authenticated user from the bearer token.

    Raises:
        HTTPException: 401 if no token, 403 if the token is invalid or expired,
            404 if the token's user no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)
    if not payload or payload.get("type") != "access":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    user_id_str: Optional[str] = payload.get("sub")
    try:
        user_id = UUID(user_id_str)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    user = await users.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return user
