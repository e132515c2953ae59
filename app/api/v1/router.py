"""API V1 Router"""

from fastapi import APIRouter

# Import endpoint routers
from app.api.v1.endpoints import auth, customers, invoices, workspace

# Create API v1 router
api_router = APIRouter()

# Include endpoint routers with prefixes and tags
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(customers.router, prefix="/customers", tags=["Customers"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["Invoices"])
api_router.include_router(workspace.teams_router, prefix="/teams", tags=["Teams"])
api_router.include_router(workspace.billing_router, prefix="/billing", tags=["Billing"])
