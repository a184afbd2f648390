"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database, fresh for every test
- Repositories bound to the test session
- Test client for the FastAPI app with repositories overridden
- Builders for customers and credit request bodies
"""

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.application.validation import add_months
from src.core.dependencies import get_credit_repository, get_customer_repository
from src.domain.entities import Address, Customer
from src.infrastructure.database import Base
from src.infrastructure.repositories import (
    PostgresCreditRepository,
    PostgresCustomerRepository,
)

CREDITS_URL = "/api/credits"
CUSTOMERS_URL = "/api/customers"


# =============================================================================
# Builders
# =============================================================================

def build_customer(**overrides) -> Customer:
    """Build a Customer entity with sensible defaults."""
    fields = {
        "first_name": "Felipe",
        "last_name": "Fruhauf",
        "cpf": "12345678910",
        "email": "felipe@teste.com",
        "income": Decimal("3000.0"),
        "password": "123456",
        "address": Address(zip_code="99555000", street="Rua dos Testes"),
    }
    fields.update(overrides)
    return Customer(**fields)


def build_customer_payload(**overrides) -> dict:
    """Build a POST /api/customers request body."""
    payload = {
        "firstName": "Felipe",
        "lastName": "Fruhauf",
        "cpf": "12345678910",
        "email": "felipe@teste.com",
        "income": 3000.0,
        "password": "123456",
        "zipCode": "99555000",
        "street": "Rua dos Testes",
    }
    payload.update(overrides)
    return payload


def build_credit_payload(customer_id: int, **overrides) -> dict:
    """Build a POST /api/credits request body."""
    payload = {
        "creditValue": 1000.0,
        "dayFirstOfInstallment": add_months(date.today(), 2).isoformat(),
        "numberOfInstallments": 10,
        "customerId": customer_id,
    }
    payload.update(overrides)
    return payload


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def customer_repository(test_session: AsyncSession) -> PostgresCustomerRepository:
    return PostgresCustomerRepository(test_session)


@pytest.fixture
def credit_repository(test_session: AsyncSession) -> PostgresCreditRepository:
    return PostgresCreditRepository(test_session)


@pytest_asyncio.fixture(autouse=True)
async def clean_database(
    credit_repository: PostgresCreditRepository,
    customer_repository: PostgresCustomerRepository,
) -> AsyncGenerator[None, None]:
    """Start and finish every test with empty credit and customer tables."""
    await credit_repository.delete_all()
    await customer_repository.delete_all()

    yield

    await credit_repository.delete_all()
    await customer_repository.delete_all()


@pytest_asyncio.fixture
async def customer(customer_repository: PostgresCustomerRepository) -> Customer:
    """A stored customer with the default builder values."""
    return await customer_repository.save(build_customer())


# =============================================================================
# App Client Fixtures
# =============================================================================

def override_repositories(session: AsyncSession) -> None:
    """Point the app's repository dependencies at the given session."""
    async def override_get_customer_repository():
        return PostgresCustomerRepository(session)

    async def override_get_credit_repository():
        return PostgresCreditRepository(session)

    app.dependency_overrides[get_customer_repository] = override_get_customer_repository
    app.dependency_overrides[get_credit_repository] = override_get_credit_repository


@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with repositories bound to the test session.

    This client uses an in-memory SQLite database that is discarded
    after the test.
    """
    override_repositories(test_session)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
