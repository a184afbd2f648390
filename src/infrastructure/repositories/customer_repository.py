"""PostgreSQL implementation of CustomerRepository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Address, Customer
from src.domain.interfaces import CustomerRepository
from src.infrastructure.database.models import CreditModel, CustomerModel


class PostgresCustomerRepository(CustomerRepository):
    """
    PostgreSQL implementation of the Customer repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """Insert a new customer or update the stored one."""
        model = None
        if customer.id is not None:
            model = await self._session.get(CustomerModel, customer.id)

        if model is None:
            model = CustomerModel(created_at=customer.created_at)
            self._session.add(model)

        model.first_name = customer.first_name
        model.last_name = customer.last_name
        model.cpf = customer.cpf
        model.email = customer.email
        model.income = customer.income
        model.password = customer.password
        model.zip_code = customer.address.zip_code
        model.street = customer.address.street

        await self._session.flush()

        customer.id = model.id
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve a customer by id."""
        stmt = select(CustomerModel).where(CustomerModel.id == customer_id)
        return await self._fetch_one(stmt)

    async def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF."""
        stmt = select(CustomerModel).where(CustomerModel.cpf == cpf)
        return await self._fetch_one(stmt)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email."""
        stmt = select(CustomerModel).where(CustomerModel.email == email)
        return await self._fetch_one(stmt)

    async def delete(self, customer_id: int) -> None:
        """Delete a customer and the credits it owns."""
        await self._session.execute(
            delete(CreditModel).where(CreditModel.customer_id == customer_id)
        )
        await self._session.execute(
            delete(CustomerModel).where(CustomerModel.id == customer_id)
        )
        await self._session.flush()

    async def delete_all(self) -> None:
        """Delete every customer and every credit."""
        await self._session.execute(delete(CreditModel))
        await self._session.execute(delete(CustomerModel))
        await self._session.flush()

    async def _fetch_one(self, stmt) -> Optional[Customer]:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: CustomerModel) -> Customer:
        """Convert database model to domain entity."""
        return Customer(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            cpf=model.cpf,
            email=model.email,
            income=model.income,
            password=model.password,
            address=Address(zip_code=model.zip_code, street=model.street),
            created_at=model.created_at,
        )
