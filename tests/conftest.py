"""Shared pytest fixtures: in-memory database, ASGI client, authenticated admin."""

import os
import uuid
from datetime import date
from typing import Any, Callable, Dict

# Settings are read at import time; give the test run its own values
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.config import settings
from app.database import Base, get_db
from app.models.enums import PlanType
from app.schemas.customer import CustomerCreate
from app.services.customer_directory import CustomerDirectory
from app.services.invoice_generator import InvoiceGenerator
from app.services.invoice_ledger import InvoiceLedger


@pytest.fixture
async def db_engine():
    """Fresh in-memory SQLite database per test, schema created from the models."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    # Let SQLAlchemy own BEGIN so SAVEPOINTs behave (pysqlite transaction quirk)
    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def customers(db_session) -> CustomerDirectory:
    return CustomerDirectory(db_session)


@pytest.fixture
def ledger(db_session, customers) -> InvoiceLedger:
    return InvoiceLedger(db_session, customers)


@pytest.fixture
def generator(customers, ledger) -> InvoiceGenerator:
    return InvoiceGenerator(customers, ledger)


@pytest.fixture
def api_base() -> str:
    """Base URL for API requests."""
    return settings.API_V1_PREFIX


@pytest.fixture
async def async_client(session_factory):
    """Async HTTP client against the app, with get_db bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", timeout=30.0) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def unique_suffix() -> str:
    """Unique suffix for test data to avoid collisions."""
    return str(uuid.uuid4())[:8]


@pytest.fixture
def customer_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid customer request body (camelCase, as clients send it)."""

    def _payload(**overrides: Any) -> Dict[str, Any]:
        payload = {
            "fullName": "Maria Santos",
            "addressStreet": "12 Rizal Ave",
            "addressCity": "Quezon City",
            "addressZip": "1100",
            "landmark": "Near the chapel",
            "contactNumber": "09171234567",
            "email": "maria.santos@isp-mail.com",
            "planType": "Basic",
            "subscriptionStartDate": "2024-01-01",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def new_customer(customers: CustomerDirectory):
    """Create a customer directly through the directory service."""

    async def _create(full_name: str = "Juan Dela Cruz", plan_type: PlanType = PlanType.BASIC):
        slug = full_name.lower().replace(" ", ".")
        return await customers.create(
            CustomerCreate(
                full_name=full_name,
                address_street="1 Mabini St",
                address_city="Manila",
                address_zip="1000",
                contact_number="09170000000",
                email=f"{slug}@isp-mail.com",
                plan_type=plan_type,
                subscription_start_date=date(2024, 1, 1),
            )
        )

    return _create


@pytest.fixture
async def registered_admin(async_client: AsyncClient, api_base: str, unique_suffix: str):
    """
    Register an administrator and return (username, password, user_id, headers).
    """
    username = f"admin_{unique_suffix}"
    password = "secret123"

    resp = await async_client.post(
        f"{api_base}/auth/register",
        json={"username": username, "password": password, "adminName": "Test Admin"},
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()

    return {
        "username": username,
        "password": password,
        "user_id": data["user"]["id"],
        "headers": {"Authorization": f"Bearer {data['token']}"},
    }
